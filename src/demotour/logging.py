"""Logging setup for the demotour CLI."""

import logging
import sys
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler


def resolve_level(verbosity: int = 0, quiet: bool = False) -> int:
    """Map CLI flags to a log level; quiet wins over any -v."""
    if quiet:
        return logging.WARNING
    if verbosity >= 1:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    stream: TextIO = sys.stderr,
) -> Console:
    """Route log records through rich on stderr.

    Args:
        verbosity: Number of -v flags (0=info, 1+=debug)
        quiet: Only show warnings and errors
        no_color: Disable colored output
        stream: Output stream for logs

    Returns:
        Console used by the log handler
    """
    log_console = Console(file=stream, no_color=no_color)

    handler = RichHandler(
        console=log_console,
        show_time=verbosity >= 2,
        show_path=verbosity >= 2,
    )

    logging.basicConfig(
        level=resolve_level(verbosity, quiet),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    return log_console

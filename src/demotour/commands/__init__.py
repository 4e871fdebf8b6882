"""CLI command implementations for demotour.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .classify import classify_lines
from .init import init
from .steps import list_steps, play, show

__all__ = [
    "classify_lines",
    "init",
    "list_steps",
    "play",
    "show",
]

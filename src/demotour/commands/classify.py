"""Classify command for ad-hoc transcript lines."""

import sys

import typer

from ..core import classify_block
from ..display import TerminalDisplay
from ..output import get_output_context
from .common import current_config


def classify_lines(
    cli_ctx: typer.Context,
    line: str | None = typer.Argument(None, help="Line to classify (reads stdin when omitted)"),
) -> None:
    """Classify transcript lines and print them styled."""
    ctx = get_output_context()
    theme = current_config(cli_ctx).display.theme

    text = line if line is not None else sys.stdin.read().removesuffix("\n")
    lines = classify_block(text)

    if ctx.json_mode:
        ctx.print_json(
            [
                {
                    "line": rendered.reveal_index,
                    "segments": [segment.model_dump(mode="json") for segment in rendered.segments],
                }
                for rendered in lines
            ]
        )
        return

    display = TerminalDisplay(ctx.console, theme=theme)
    for rendered in lines:
        ctx.console.print(display.line_text(rendered))

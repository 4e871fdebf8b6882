"""Step list, show and play commands."""

from pathlib import Path

import typer

from ..display import TerminalDisplay
from ..errors import StepIndexError
from ..output import get_output_context
from .common import build_viewer, current_config

CATALOG_OPTION_HELP = "TOML catalog of [[steps]] (defaults to config or built-in demo)"


def list_steps(
    cli_ctx: typer.Context,
    catalog: Path | None = typer.Option(None, "--catalog", "-c", help=CATALOG_OPTION_HELP),
) -> None:
    """List demo steps."""
    ctx = get_output_context()
    viewer = build_viewer(ctx, current_config(cli_ctx), catalog)

    if ctx.json_mode:
        ctx.print_json(
            [
                {"step_number": i + 1, "title": step.title, "code_title": step.code_title}
                for i, step in enumerate(viewer.steps)
            ]
        )
        return

    for i, step in enumerate(viewer.steps):
        ctx.console.print(f"[bold]{i + 1}.[/bold] {step.title} [dim]({step.code_title})[/dim]")


def show(
    cli_ctx: typer.Context,
    n: int = typer.Argument(..., help="Step number (1-based)"),
    catalog: Path | None = typer.Option(None, "--catalog", "-c", help=CATALOG_OPTION_HELP),
    animate: bool | None = typer.Option(
        None, "--animate/--no-animate", help="Reveal code lines one by one"
    ),
) -> None:
    """Show one demo step."""
    ctx = get_output_context()
    config = current_config(cli_ctx)
    viewer = build_viewer(ctx, config, catalog)

    try:
        viewer.select(n - 1)
    except StepIndexError:
        available = list(range(1, len(viewer) + 1))
        ctx.error(f"Step {n} not found. Available: {available}", {"available": available})
        raise typer.Exit(1) from None

    view = viewer.render()
    if ctx.json_mode:
        ctx.print_json(view.model_dump(mode="json"))
        return

    display = TerminalDisplay.from_config(ctx.console, config.display)
    display.show(view, animate=config.display.animate if animate is None else animate)


def play(
    cli_ctx: typer.Context,
    catalog: Path | None = typer.Option(None, "--catalog", "-c", help=CATALOG_OPTION_HELP),
    pause: bool = typer.Option(False, "--pause", help="Wait for Enter between steps"),
    animate: bool | None = typer.Option(
        None, "--animate/--no-animate", help="Reveal code lines one by one"
    ),
) -> None:
    """Walk through every demo step in order."""
    ctx = get_output_context()
    config = current_config(cli_ctx)
    viewer = build_viewer(ctx, config, catalog)

    if ctx.json_mode:
        views = []
        viewer.subscribe(views.append)
        views.append(viewer.render())
        for i in range(1, len(viewer)):
            viewer.select(i)
        ctx.print_json([view.model_dump(mode="json") for view in views])
        return

    display = TerminalDisplay.from_config(ctx.console, config.display)
    should_animate = config.display.animate if animate is None else animate
    display.show(viewer.render(), animate=should_animate)
    display.attach(viewer, animate=should_animate)

    for i in range(1, len(viewer)):
        if pause:
            ctx.console.input("[dim]Press Enter for the next step...[/dim]")
        ctx.console.rule()
        viewer.select(i)

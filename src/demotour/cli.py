"""demotour CLI: scripted product demo walkthrough."""

from pathlib import Path

import typer
from rich.console import Console

from demotour import __version__

from .commands import classify_lines, init, list_steps, play, show
from .config import get_config_path, load_config
from .errors import ConfigError
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"demotour {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="demotour",
    help="Scripted product demo walkthrough with colored transcripts",
    no_args_is_help=True,
)


@app.callback()
def main(
    cli_ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: .demotour/config.toml)",
    ),
) -> None:
    """demotour - walk through a scripted product demo."""
    configure_logging(verbosity=verbose, quiet=quiet, no_color=no_color)
    ctx = OutputContext(
        console=Console(no_color=no_color, highlight=False),
        json_mode=json_output,
    )
    set_output_context(ctx)

    try:
        cli_ctx.obj = load_config(config or get_config_path())
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None


app.command()(init)
app.command("list")(list_steps)
app.command()(show)
app.command()(play)
app.command("classify")(classify_lines)


if __name__ == "__main__":
    app()

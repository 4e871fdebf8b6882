"""Init command implementation."""

from pathlib import Path

import typer

from ..config import get_config_path, write_config_template
from ..output import get_output_context


def init(
    path: Path | None = typer.Option(
        None, "--path", "-p", help="Config file to create (default: .demotour/config.toml)"
    ),
) -> None:
    """Write a config template for demotour."""
    ctx = get_output_context()
    config_path = path or get_config_path()

    if config_path.exists():
        ctx.error(f"Config already exists: {config_path}", {"path": str(config_path)})
        raise typer.Exit(1)

    write_config_template(config_path)
    ctx.success(f"Created config template: {config_path}", {"path": str(config_path)})

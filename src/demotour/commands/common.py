"""Helpers shared by CLI commands."""

from pathlib import Path

import typer

from ..catalog import resolve_catalog
from ..config import DemoTourConfig
from ..core import StepViewer
from ..errors import CatalogError, EmptyCatalogError
from ..output import OutputContext


def current_config(cli_ctx: typer.Context) -> DemoTourConfig:
    """Config loaded by the main callback, or defaults when run standalone."""
    root = cli_ctx.find_root()
    if isinstance(root.obj, DemoTourConfig):
        return root.obj
    return DemoTourConfig()


def build_viewer(ctx: OutputContext, config: DemoTourConfig, catalog: Path | None) -> StepViewer:
    """Load the catalog and wrap it in a viewer, exiting on catalog errors."""
    try:
        return StepViewer(resolve_catalog(config, catalog))
    except (CatalogError, EmptyCatalogError) as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None

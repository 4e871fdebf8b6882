"""Shared test fixtures for demotour tests."""

import io
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from demotour.models import Step


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def console() -> Console:
    """Create a plain, wide console writing to memory."""
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, width=120)


@pytest.fixture
def sample_steps() -> tuple[Step, ...]:
    """Return a small three-step catalog."""
    return (
        Step(
            title="Start",
            description="Run it locally.",
            code_title="terminal",
            code="# Start it\n$ demo up\n\n{\"ok\": true}",
        ),
        Step(
            title="Configure",
            description="Point it at the cloud.",
            code_title="demo.toml",
            code='[storage]\nbackend = "s3"',
        ),
        Step(
            title="Check",
            description="Look at the cluster.",
            code_title="terminal",
            code="$ demo status\n  Writers:  1 (active)\n  ✓ healthy",
        ),
    )


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Write a two-step TOML catalog and return its path."""
    path = tmp_path / "catalog.toml"
    path.write_text(
        """[[steps]]
title = "Hello"
description = "Say hello."
code_title = "terminal"
code = '''
$ echo hello
hello'''

[[steps]]
title = "Config"
code_title = "app.toml"
code = '''
[app]
name = "demo"'''
""",
        encoding="utf-8",
    )
    return path

"""Allow running as ``python -m demotour``."""

from .cli import app

app(prog_name="demotour")

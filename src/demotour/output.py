"""Human and JSON output for the demotour CLI."""

import json
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.markup import escape


@dataclass
class OutputContext:
    """Where command results go: styled console text, or JSON on stdout with ``--json``."""

    console: Console
    json_mode: bool = False

    def print_json(self, data: Any) -> None:
        """Write data as JSON; no-op outside json mode."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str, ensure_ascii=False))

    def _report(self, key: str, message: str, data: dict[str, Any] | None, markup: str) -> None:
        if self.json_mode:
            self.print_json({key: message, **(data or {})})
        else:
            # Messages carry paths and validation text, never markup
            self.console.print(markup.format(escape(message)))

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Report a failure; ``data`` is merged into the JSON payload."""
        self._report("error", message, data, "[red]Error: {}[/red]")

    def success(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Report a completed action; ``data`` is merged into the JSON payload."""
        self._report("success", message, data, "[green]{}[/green]")


_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Context installed by the CLI callback, or a plain console one."""
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext | None) -> None:
    global _ctx
    _ctx = ctx

"""Terminal display surface for rendered step views.

Maps style tags to rich styles through the configured theme and draws
the step list plus the code panel. Code lines are revealed one at a
time, in ascending reveal index, every time a new view is shown.
"""

import time
from collections.abc import Callable, Iterator

from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import DisplayConfig, ThemeConfig
from .core import StepViewer
from .models import RenderedLine, StepView

PANEL_STYLE = "on #1e1e2e"
PANEL_BORDER_STYLE = "#313244"
PANEL_TITLE_STYLE = "#a6adc8"
ACTIVE_STYLE = "bold #6366f1"
INACTIVE_STYLE = "#64748b"


class TerminalDisplay:
    """Draws step views on a rich console."""

    def __init__(
        self,
        console: Console,
        theme: ThemeConfig | None = None,
        reveal_delay_ms: int = 0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.console = console
        self.theme = theme or ThemeConfig()
        self.reveal_delay_ms = reveal_delay_ms
        self._sleep = sleep

    @classmethod
    def from_config(cls, console: Console, config: DisplayConfig) -> "TerminalDisplay":
        return cls(console, theme=config.theme, reveal_delay_ms=config.reveal_delay_ms)

    def line_text(self, line: RenderedLine) -> Text:
        """Build styled text for one classified line."""
        text = Text(no_wrap=True)
        for segment in line.segments:
            text.append(segment.text, style=self.theme.style_for(segment.style))
        return text

    def code_panel(self, view: StepView, upto: int | None = None) -> Panel:
        """Panel with the view's code lines, optionally only the first ``upto``."""
        lines = sorted(view.lines, key=lambda line: line.reveal_index)
        if upto is not None:
            lines = lines[:upto]
        body = Text("\n").join(self.line_text(line) for line in lines)
        return Panel(
            body,
            title=Text(view.code_title, style=PANEL_TITLE_STYLE),
            title_align="left",
            style=PANEL_STYLE,
            border_style=PANEL_BORDER_STYLE,
        )

    def outline_table(self, view: StepView) -> Table:
        """Numbered step list with the active step expanded."""
        table = Table.grid(padding=(0, 1))
        table.add_column(justify="right")
        table.add_column()
        for entry in view.outline:
            style = ACTIVE_STYLE if entry.is_active else INACTIVE_STYLE
            table.add_row(Text(f"{entry.step_number}", style=style), Text(entry.title, style=style))
            if entry.description:
                table.add_row("", Text.from_markup(entry.description, style=INACTIVE_STYLE))
        return table

    def reveal_frames(self, view: StepView) -> Iterator[Panel]:
        """Yield the code panel growing by one line per frame, starting from an empty panel."""
        for upto in range(len(view.lines) + 1):
            yield self.code_panel(view, upto=upto)

    def show(self, view: StepView, animate: bool = True) -> None:
        """Print the outline, then the code panel.

        When animating, lines appear one by one with ``reveal_delay_ms``
        between them. Each call starts revealing from the first line.
        """
        self.console.print(self.outline_table(view))
        self.console.print()

        if not animate or not view.lines:
            self.console.print(self.code_panel(view))
            return

        delay = self.reveal_delay_ms / 1000
        frames = self.reveal_frames(view)
        with Live(next(frames), console=self.console, auto_refresh=False) as live:
            for frame in frames:
                if delay:
                    self._sleep(delay)
                live.update(frame, refresh=True)

    def attach(self, viewer: StepViewer, animate: bool = True) -> Callable[[], None]:
        """Show every view the viewer produces on selection.

        Returns:
            Callable that detaches the display again
        """
        return viewer.subscribe(lambda view: self.show(view, animate=animate))


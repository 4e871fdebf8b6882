"""Step selection and view rendering."""

import logging
import operator
from collections.abc import Callable, Sequence

from ..errors import EmptyCatalogError, StepIndexError
from ..models import OutlineEntry, Step, StepView
from .classifier import classify_block

logger = logging.getLogger(__name__)

Listener = Callable[[StepView], None]


class StepViewer:
    """Holds a step catalog and the single active step.

    The selection starts at the first step and only changes through
    :meth:`select`. Every successful selection re-renders the view and
    hands it to the subscribed listeners.

    Example:
        >>> viewer = StepViewer(DEFAULT_STEPS)
        >>> viewer.select(1)
        >>> viewer.render().code_title
        'opendata.toml'
    """

    def __init__(self, steps: Sequence[Step]) -> None:
        self._steps: tuple[Step, ...] = tuple(steps)
        if not self._steps:
            raise EmptyCatalogError("Step catalog is empty")
        self._index = 0
        self._listeners: list[Listener] = []

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def selected_index(self) -> int:
        return self._index

    @property
    def active_step(self) -> Step:
        return self._steps[self._index]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with the new view after each selection.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def select(self, index: int) -> None:
        """Make the step at ``index`` active.

        Args:
            index: 0-based catalog position

        Raises:
            StepIndexError: If index is outside [0, len(steps)). Negative
                indices are rejected rather than counted from the end.
            TypeError: If index is not an integer.
        """
        index = operator.index(index)
        if not 0 <= index < len(self._steps):
            raise StepIndexError(index, len(self._steps))
        self._index = index
        logger.debug(f"Selected step {index}: {self._steps[index].title}")

        if self._listeners:
            view = self.render()
            for listener in list(self._listeners):
                listener(view)

    def outline(self) -> list[OutlineEntry]:
        """Step list with 1-based numbers; only the active step keeps its description."""
        return [
            OutlineEntry(
                index=i,
                step_number=i + 1,
                title=step.title,
                is_active=i == self._index,
                description=step.description if i == self._index else None,
            )
            for i, step in enumerate(self._steps)
        ]

    def render(self) -> StepView:
        """Project the current selection into a view model."""
        step = self.active_step
        return StepView(
            active_index=self._index,
            active_title=step.title,
            active_description=step.description,
            code_title=step.code_title,
            lines=classify_block(step.code),
            outline=self.outline(),
        )

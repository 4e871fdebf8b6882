"""Pydantic data models for demotour.

This package defines the data structures shared by the classifier,
the step viewer and the display surface:
- Demo steps (Step)
- Classified line fragments (Segment, StyleTag)
- The rendered view model (RenderedLine, OutlineEntry, StepView)

Example:
    >>> from demotour.models import Segment, StyleTag
    >>> Segment(text="$", style=StyleTag.PROMPT_MARKER)
"""

from .segment import Segment, StyleTag
from .step import Step
from .view import OutlineEntry, RenderedLine, StepView

__all__ = [
    "OutlineEntry",
    "RenderedLine",
    "Segment",
    "Step",
    "StepView",
    "StyleTag",
]

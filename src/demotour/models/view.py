"""View model produced by the step viewer."""

from pydantic import BaseModel, ConfigDict, Field

from .segment import Segment


class RenderedLine(BaseModel):
    """A classified code line tagged with its reveal position."""

    model_config = ConfigDict(frozen=True)

    reveal_index: int = Field(ge=0, description="0-based line position in the code block")
    segments: list[Segment] = Field(description="Ordered, lossless partition of the line")

    @property
    def text(self) -> str:
        """Original line text, rebuilt from its segments."""
        return "".join(segment.text for segment in self.segments)


class OutlineEntry(BaseModel):
    """One row of the step list."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(description="0-based position in the catalog")
    step_number: int = Field(description="1-based number shown to the viewer")
    title: str
    is_active: bool
    description: str | None = Field(
        default=None, description="Only set for the active step"
    )


class StepView(BaseModel):
    """Everything a display surface needs to draw the active step."""

    model_config = ConfigDict(frozen=True)

    active_index: int
    active_title: str
    active_description: str
    code_title: str
    lines: list[RenderedLine] = Field(default_factory=list)
    outline: list[OutlineEntry] = Field(default_factory=list)

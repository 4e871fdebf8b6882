"""Step model for the demo script.

A step pairs narrative text with a terminal or config transcript.
Steps are defined once as an ordered catalog; a step's position in
that catalog is its only identity.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.errors import MarkupError, StyleSyntaxError
from rich.markup import render
from rich.style import Style


class Step(BaseModel):
    """One entry in the demo script.

    Attributes:
        title: Short heading shown in the step list.
        description: Narrative text in rich markup. Literal brackets must
            be escaped (``\\[storage]``).
        code_title: Caption of the code panel (file name or "terminal").
        code: Transcript text; lines are separated by "\\n".

    Example:
        >>> step = Step(
        ...     title="Local Development",
        ...     description="Start locally with a single command.",
        ...     code_title="terminal",
        ...     code="$ docker run -p 8080:8080 opendata/log:latest",
        ... )
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Human-readable step title")
    description: str = Field(default="", description="Narrative text (rich markup)")
    code_title: str = Field(description="Caption of the code panel")
    code: str = Field(description="Transcript shown in the code panel")

    @field_validator("description")
    @classmethod
    def _check_markup(cls, value: str) -> str:
        # An unknown tag would be swallowed as a style and its text lost
        try:
            text = render(value)
            for span in text.spans:
                if isinstance(span.style, str):
                    Style.parse(span.style)
        except MarkupError as e:
            raise ValueError(f"invalid markup: {e}") from e
        except StyleSyntaxError:
            raise ValueError(
                f"[{span.style}] is not a style; write \\[{span.style}] for literal brackets"
            ) from None
        return value

    def code_lines(self) -> list[str]:
        """Split the transcript into lines, keeping empty lines."""
        return self.code.split("\n")

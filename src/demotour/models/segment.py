"""Segment model for classified line fragments."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class StyleTag(str, Enum):
    """Closed set of style classifications attached to a segment."""

    COMMENT = "comment"
    PROMPT_MARKER = "prompt_marker"
    PROMPT_BODY = "prompt_body"
    KEY_NAME = "key_name"
    KEY_SEPARATOR = "key_separator"
    KEY_VALUE = "key_value"
    SUCCESS_MARKER = "success_marker"
    STRUCTURED_DATA = "structured_data"
    STATUS_LABEL = "status_label"
    STATUS_VALUE = "status_value"
    SECTION_HEADER = "section_header"
    PLAIN = "plain"


class Segment(BaseModel):
    """A contiguous run of a line's text carrying one style tag.

    Text may be empty, e.g. the indentation segment of an unindented
    key/value line.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Characters taken verbatim from the line")
    style: StyleTag = Field(description="Style classification for this run")

"""Line classification for demo transcripts.

Each line of a transcript is classified on its own text alone by an
ordered list of rules. The first rule whose predicate accepts the line
and whose decomposer splits it wins; a decomposer may return None to
hand the line on to later rules. Lines no rule claims become a single
plain segment.

Segments always concatenate back to the exact input line.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from ..constants import STATUS_LABELS, SUCCESS_MARK
from ..models import RenderedLine, Segment, StyleTag

# Word characters are ASCII only; whitespace is any Unicode whitespace,
# the same set str.lstrip() removes for the comment and structured rules.
_WORD = "A-Za-z0-9_"

_KEY_VALUE_TEST = re.compile(rf"\s*[{_WORD}][{_WORD}.-]*\s*[:=]")
_KEY_VALUE_SPLIT = re.compile(rf"(\s*)([{_WORD}.\[\]-]+)(\s*[:=]\s*)(.*)", re.DOTALL)
_STATUS_TEST = re.compile(
    r"\s*(?:" + "|".join(re.escape(label) for label in STATUS_LABELS) + r"):"
)
_STATUS_SPLIT = re.compile(rf"(\s*[{_WORD}]+:)(.*)", re.DOTALL)
_SECTION_HEADER = re.compile(rf"\s*\[[{_WORD}.-]+\]")


@dataclass(frozen=True)
class Rule:
    """A named (predicate, decomposer) pair."""

    name: str
    applies: Callable[[str], bool]
    decompose: Callable[[str], list[Segment] | None]


def _whole(style: StyleTag) -> Callable[[str], list[Segment]]:
    def decompose(line: str) -> list[Segment]:
        return [Segment(text=line, style=style)]

    return decompose


def _is_comment(line: str) -> bool:
    return line.lstrip().startswith("#")


def _is_prompt(line: str) -> bool:
    return line.startswith("$")


def _split_prompt(line: str) -> list[Segment]:
    return [
        Segment(text=line[:1], style=StyleTag.PROMPT_MARKER),
        Segment(text=line[1:], style=StyleTag.PROMPT_BODY),
    ]


def _is_status(line: str) -> bool:
    return _STATUS_TEST.match(line) is not None


def _split_status(line: str) -> list[Segment] | None:
    match = _STATUS_SPLIT.match(line)
    if match is None:
        return None
    label, rest = match.groups()
    return [
        Segment(text=label, style=StyleTag.STATUS_LABEL),
        Segment(text=rest, style=StyleTag.STATUS_VALUE),
    ]


def _is_key_value(line: str) -> bool:
    return _KEY_VALUE_TEST.match(line) is not None


def _split_key_value(line: str) -> list[Segment] | None:
    # The broad test and the capture can disagree; fall through when they do
    match = _KEY_VALUE_SPLIT.match(line)
    if match is None:
        return None
    indent, key, separator, value = match.groups()
    return [
        Segment(text=indent, style=StyleTag.PLAIN),
        Segment(text=key, style=StyleTag.KEY_NAME),
        Segment(text=separator, style=StyleTag.KEY_SEPARATOR),
        Segment(text=value, style=StyleTag.KEY_VALUE),
    ]


def _has_success_mark(line: str) -> bool:
    return SUCCESS_MARK in line


def _is_section_header(line: str) -> bool:
    return _SECTION_HEADER.match(line) is not None


def _is_structured(line: str) -> bool:
    return line.lstrip().startswith(("{", "["))


# Order is significant: several predicates overlap.
RULES: tuple[Rule, ...] = (
    Rule("comment", _is_comment, _whole(StyleTag.COMMENT)),
    Rule("prompt", _is_prompt, _split_prompt),
    Rule("status", _is_status, _split_status),
    Rule("key_value", _is_key_value, _split_key_value),
    Rule("success", _has_success_mark, _whole(StyleTag.SUCCESS_MARKER)),
    Rule("section_header", _is_section_header, _whole(StyleTag.SECTION_HEADER)),
    Rule("structured_data", _is_structured, _whole(StyleTag.STRUCTURED_DATA)),
)


def match_rule(line: str) -> tuple[Rule | None, list[Segment]]:
    """Find the rule that claims a line.

    Args:
        line: A single line of transcript text

    Returns:
        Tuple of (winning rule or None for the default, segments)
    """
    for rule in RULES:
        if not rule.applies(line):
            continue
        segments = rule.decompose(line)
        if segments is not None:
            return rule, segments
    return None, [Segment(text=line, style=StyleTag.PLAIN)]


def classify(line: str) -> list[Segment]:
    """Split a line into styled segments.

    Total for every string: the result always holds at least one
    segment and the segment texts join back to ``line``.

    Args:
        line: A single line of transcript text

    Returns:
        Ordered list of segments
    """
    _, segments = match_rule(line)
    return segments


def classify_block(code: str) -> list[RenderedLine]:
    """Classify every line of a code block.

    Lines are split on "\\n" only, so empty lines and a trailing empty
    line are kept. Each line's reveal index is its 0-based position.
    """
    return [
        RenderedLine(reveal_index=i, segments=classify(line))
        for i, line in enumerate(code.split("\n"))
    ]

"""Core logic for demotour.

Pure, in-memory building blocks with no I/O:
- classifier: line classification into styled segments
- viewer: step selection and view rendering
"""

from .classifier import RULES, Rule, classify, classify_block, match_rule
from .viewer import StepViewer

__all__ = [
    "RULES",
    "Rule",
    "StepViewer",
    "classify",
    "classify_block",
    "match_rule",
]

"""Pydantic models and grammar constants."""

from gstconf.models.action_models import ActionRecord
from gstconf.models.constants import (
    FALSE_LITERAL,
    SECTION_KEYWORD,
    TRUE_LITERAL,
    ActionKey,
    ScalarKind,
)

__all__ = [
    "FALSE_LITERAL",
    "SECTION_KEYWORD",
    "TRUE_LITERAL",
    "ActionKey",
    "ActionRecord",
    "ScalarKind",
]

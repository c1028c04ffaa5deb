"""Scalar text conversion for action fields.

The default (lenient) rules follow C ``atoi``/``atof`` in the C locale: the
longest valid ASCII numeric prefix is used and text without one converts to
zero. Non-ASCII digits and spaces never count. Strict mode requires the
whole text to be a valid number and reports failures instead.
"""

import math
import re
from typing import Any

from gstconf.models.constants import FALSE_LITERAL, TRUE_LITERAL, ScalarKind

_C_SPACE = " \t\n\v\f\r"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|[+-]?(?:inf(?:inity)?|nan))",
    re.IGNORECASE | re.ASCII,
)
_STRICT_INT = re.compile(r"[+-]?\d+", re.ASCII)
_STRICT_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class ScalarConversionError(ValueError):
    """Raised by strict conversion when text does not fit the field type."""

    pass


def to_int(text: str) -> int:
    """Leading decimal integer of ``text``, or 0."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def to_float(text: str) -> float:
    """Leading decimal number of ``text``, or 0.0."""
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0.0
    return float(match.group(1))


def to_bool(text: str) -> bool:
    return text == TRUE_LITERAL


def to_int_strict(text: str) -> int:
    stripped = text.strip(_C_SPACE)
    if not _STRICT_INT.fullmatch(stripped):
        raise ScalarConversionError(f"not a base-10 integer: {text!r}")
    return int(stripped)


def to_float_strict(text: str) -> float:
    stripped = text.strip(_C_SPACE)
    if not _STRICT_FLOAT.fullmatch(stripped):
        raise ScalarConversionError(f"not a decimal number: {text!r}")
    value = float(stripped)
    if math.isinf(value):
        raise ScalarConversionError(f"decimal number out of range: {text!r}")
    return value


def to_bool_strict(text: str) -> bool:
    if text not in (TRUE_LITERAL, FALSE_LITERAL):
        raise ScalarConversionError(
            f"expected '{TRUE_LITERAL}' or '{FALSE_LITERAL}': {text!r}"
        )
    return text == TRUE_LITERAL


_LENIENT = {
    ScalarKind.STRING: str,
    ScalarKind.INTEGER: to_int,
    ScalarKind.DECIMAL: to_float,
    ScalarKind.BOOLEAN: to_bool,
}

_STRICT = {
    ScalarKind.STRING: str,
    ScalarKind.INTEGER: to_int_strict,
    ScalarKind.DECIMAL: to_float_strict,
    ScalarKind.BOOLEAN: to_bool_strict,
}


def convert_scalar(text: str, kind: ScalarKind, strict: bool = False) -> Any:
    """Convert scalar text to the Python value for a field of ``kind``.

    Raises:
        ScalarConversionError: Only when ``strict`` is True.
    """
    converters = _STRICT if strict else _LENIENT
    return converters[kind](text)

"""Tests for scalar text conversion."""

import math

import pytest

from gstconf.models.constants import ScalarKind
from gstconf.parser.convert import (
    ScalarConversionError,
    convert_scalar,
    to_bool,
    to_float,
    to_int,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5", 5),
        ("-12", -12),
        ("+7", 7),
        ("  42", 42),
        ("12abc", 12),
        ("3.9", 3),
        ("abc", 0),
        ("", 0),
    ],
)
def test_to_int_uses_leading_digits(text, expected):
    """Integers follow atoi: longest numeric prefix, else zero."""
    assert to_int(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("4500.5", 4500.5),
        ("-0.25", -0.25),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("2.5x", 2.5),
        ("1e", 1.0),
        ("inf", math.inf),
        ("abc", 0.0),
        ("", 0.0),
    ],
)
def test_to_float_uses_leading_number(text, expected):
    """Decimals follow atof: longest numeric prefix, else zero."""
    assert to_float(text) == expected


def test_to_float_nan():
    assert math.isnan(to_float("nan"))


@pytest.mark.parametrize(
    "text, expected",
    [("true", True), ("false", False), ("True", False), ("yes", False), ("", False)],
)
def test_to_bool_only_literal_true(text, expected):
    assert to_bool(text) is expected


def test_convert_scalar_string_is_verbatim():
    assert convert_scalar("  spaced  ", ScalarKind.STRING) == "  spaced  "
    assert convert_scalar("  spaced  ", ScalarKind.STRING, strict=True) == "  spaced  "


class TestStrict:
    """Strict conversion rejects what lenient conversion defaults."""

    def test_valid_values(self):
        assert convert_scalar("10", ScalarKind.INTEGER, strict=True) == 10
        assert convert_scalar(" -3 ", ScalarKind.INTEGER, strict=True) == -3
        assert convert_scalar("1.5e2", ScalarKind.DECIMAL, strict=True) == 150.0
        assert convert_scalar("true", ScalarKind.BOOLEAN, strict=True) is True
        assert convert_scalar("false", ScalarKind.BOOLEAN, strict=True) is False

    @pytest.mark.parametrize(
        "text, kind",
        [
            ("abc", ScalarKind.INTEGER),
            ("12abc", ScalarKind.INTEGER),
            ("3.9", ScalarKind.INTEGER),
            ("", ScalarKind.INTEGER),
            ("2.5x", ScalarKind.DECIMAL),
            ("nan", ScalarKind.DECIMAL),
            ("1e999", ScalarKind.DECIMAL),
            ("yes", ScalarKind.BOOLEAN),
            ("True", ScalarKind.BOOLEAN),
        ],
    )
    def test_invalid_values(self, text, kind):
        with pytest.raises(ScalarConversionError):
            convert_scalar(text, kind, strict=True)


@pytest.mark.parametrize(
    "text",
    ["٥٠", "١.٥", "７", "\u00a05", "\u20035"],
    ids=["arabic-indic", "arabic-indic-decimal", "fullwidth", "nbsp", "em-space"],
)
def test_non_ascii_digits_and_spaces_are_not_numbers(text):
    """Only ASCII digits and C whitespace count, as with atoi/atof."""
    assert to_int(text) == 0
    assert to_float(text) == 0.0


@pytest.mark.parametrize(
    "text, kind",
    [
        ("٥", ScalarKind.INTEGER),
        ("٥٠", ScalarKind.INTEGER),
        ("١.٥", ScalarKind.DECIMAL),
        ("\u00a05", ScalarKind.INTEGER),
        ("5\u2003", ScalarKind.DECIMAL),
    ],
)
def test_strict_rejects_non_ascii_numbers(text, kind):
    with pytest.raises(ScalarConversionError):
        convert_scalar(text, kind, strict=True)

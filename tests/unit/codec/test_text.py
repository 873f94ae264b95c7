"""Tests for decimal text parsing, scanning and formatting."""

import pytest

from bigdec import Dec, InvalidSyntaxError, NoDigitsError, ParseError, TrailingCharactersError, parse, try_parse
from bigdec.codec.text import format_decimal, parse_decimal, scan_decimal


class TestParse:
    """Whole-string parsing."""

    @pytest.mark.parametrize(
        "text,unscaled,scale",
        [
            ("0", 0, 0),
            ("0.00", 0, 2),
            ("012345.67890", 1234567890, 5),
            ("-1.5", -15, 1),
            ("+1.5", 15, 1),
            ("-.5", -5, 1),
            (".25", 25, 2),
            ("7.", 7, 0),
            ("184467440.73709551617", 18446744073709551617, 11),
            ("-0", 0, 0),
        ],
    )
    def test_valid(self, text, unscaled, scale):
        assert parse_decimal(text) == (unscaled, scale)
        d = Dec.parse(text)
        assert (d.unscaled, d.scale) == (unscaled, scale)

    def test_keeps_trailing_zeros_drops_leading(self):
        assert str(parse("012345.67890")) == "12345.67890"

    @pytest.mark.parametrize("text", ["", "-", "+", ".", "-.", "--1", "abc", " 1"])
    def test_no_digits(self, text):
        with pytest.raises(NoDigitsError, match="no digits read"):
            parse(text)

    @pytest.mark.parametrize(
        "text,rest",
        [
            ("1.2.3", ".3"),
            ("1-2", "-2"),
            ("1e5", "e5"),
            ("12 ", " "),
            ("1_000", "_000"),
        ],
    )
    def test_trailing_characters(self, text, rest):
        with pytest.raises(TrailingCharactersError) as exc_info:
            parse(text)
        assert repr(rest) in str(exc_info.value)

    def test_sign_after_point_stops(self):
        """A sign after the decimal point ends the value."""
        with pytest.raises(NoDigitsError):
            parse(".-5")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse("x")
        assert issubclass(InvalidSyntaxError, ParseError)

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(NoDigitsError):
            parse("١٢")

    def test_very_long_input(self):
        text = "1" * 6000 + "." + "2" * 6000
        d = parse(text)
        assert d.scale == 6000
        assert str(d) == text

    def test_try_parse(self):
        assert try_parse("1.50") == Dec(150, 2)
        assert try_parse("1.5x") is None
        assert Dec.try_parse("") is None


class TestScan:
    """Scanning a value out of a longer string."""

    def test_stops_at_unexpected_character(self):
        assert scan_decimal("12.5kg") == (125, 1, 4)

    def test_starts_at_offset(self):
        assert scan_decimal("x=-3.25;", 2) == (-325, 2, 7)

    def test_skips_leading_space(self):
        d, end = Dec.scan("   42.0 rest")
        assert (d.unscaled, d.scale, end) == (420, 1, 7)

    def test_without_space_skipping(self):
        with pytest.raises(NoDigitsError):
            scan_decimal("  1")

    def test_second_point_not_consumed(self):
        assert scan_decimal("1.2.3") == (12, 1, 3)

    def test_consecutive_values(self):
        text = "1.5 -2.25 3"
        values = []
        pos = 0
        while pos < len(text):
            d, pos = Dec.scan(text, pos)
            values.append(str(d))
        assert values == ["1.5", "-2.25", "3"]


class TestFormat:
    """Canonical text for (unscaled, scale)."""

    @pytest.mark.parametrize(
        "unscaled,scale,expected",
        [
            (0, 0, "0"),
            (0, 2, "0.00"),
            (0, -2, "0"),
            (1, 0, "1"),
            (100, 2, "1.00"),
            (10, 0, "10"),
            (1, -1, "10"),
            (-1, -3, "-1000"),
            (5, 3, "0.005"),
            (-5, 3, "-0.005"),
            (123, 3, "0.123"),
            (-123, 3, "-0.123"),
            (1234, 3, "1.234"),
            (-1234, 3, "-1.234"),
            (-333, 2, "-3.33"),
        ],
    )
    def test_format(self, unscaled, scale, expected):
        assert format_decimal(unscaled, scale) == expected
        assert str(Dec(unscaled, scale)) == expected

    def test_repr(self):
        assert repr(Dec(-150, 2)) == "Dec('-1.50')"

    @pytest.mark.parametrize("spec", ["", "d", "f", "s", "v"])
    def test_format_verbs(self, spec):
        assert format(Dec(150, 2), spec) == "1.50"
        assert f"{Dec(150, 2)}" == "1.50"

    def test_unsupported_format_verb(self):
        with pytest.raises(ValueError):
            format(Dec(150, 2), "x")

    @pytest.mark.parametrize(
        "unscaled,scale",
        [(0, 0), (0, 5), (0, -5), (7, -2), (-7, 4), (10**40 + 1, 20), (-(10**40), -3), (123456789, 9)],
    )
    def test_parse_of_format_compares_equal(self, unscaled, scale):
        d = Dec(unscaled, scale)
        assert parse(str(d)) == d

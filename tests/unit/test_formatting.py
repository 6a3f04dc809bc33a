"""Unit tests for display formatting and parsing."""

import math

import pytest

from pocketcalc import format_number, parse_display


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (8.0, "8"),
            (8, "8"),
            (-2.5, "-2.5"),
            (0.1 + 0.2, "0.30000000000000004"),
            (123.456, "123.456"),
            (1e20, "100000000000000000000"),
            (1.2345678901234568e20, "123456789012345680000"),
            (1e21, "1e+21"),
            (1.5e22, "1.5e+22"),
            (0.000001, "0.000001"),
            (0.0000015, "0.0000015"),
            (1e-7, "1e-7"),
            (-1.5e-7, "-1.5e-7"),
            (1.7976931348623157e308, "1.7976931348623157e+308"),
            (5e-324, "5e-324"),
        ],
    )
    def test_matches_browser_number_printing(self, value, expected):
        assert format_number(value) == expected

    def test_negative_zero_prints_as_zero(self):
        assert format_number(-0.0) == "0"

    def test_non_finite_values(self):
        assert format_number(math.nan) == "NaN"
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"


class TestParseDisplay:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", 0.0),
            ("42", 42.0),
            ("3.", 3.0),
            ("0.", 0.0),
            (".5", 0.5),
            ("-4", -4.0),
            ("1e+21", 1e21),
            ("1e-7", 1e-7),
            ("1e+215", 1e215),
            ("1e+21.", 1e21),
            ("Infinity", math.inf),
            ("-Infinity", -math.inf),
            ("Infinity5", math.inf),
            ("1e", 1.0),
        ],
    )
    def test_uses_longest_numeric_prefix(self, text, expected):
        assert parse_display(text) == expected

    @pytest.mark.parametrize("text", ["NaN", "NaN5", "NaN.", "", "abc", "."])
    def test_no_numeric_prefix_is_nan(self, text):
        assert math.isnan(parse_display(text))

    def test_huge_exponent_is_infinite(self):
        assert parse_display("1e+2155") == math.inf

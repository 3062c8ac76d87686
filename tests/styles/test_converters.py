"""
Tests for style value converters.
"""

import pytest

from html_interpreter.styles.converters import (
    convert_color,
    convert_float,
    convert_size,
    convert_symbol,
    copy_value,
    normalize_style,
    unquote,
)


class TestConvertColor:
    """Test cases for convert_color."""

    @pytest.mark.parametrize("raw, expected", [
        ("#FFBB11", "ffbb11"),
        ("ffbb11", "ffbb11"),
        ("#fb1", "ffbb11"),
        (" red ", "ff0000"),
        ("Navy", "000080"),
        ("rgb(255, 0, 16)", "ff0010"),
        ("rgba(1, 2, 3, 0.5)", "010203"),
    ])
    def test_recognized_colors(self, raw, expected):
        assert convert_color(raw) == expected

    def test_rgb_components_are_clamped(self):
        assert convert_color("rgb(300, 0, 0)") == "ff0000"

    @pytest.mark.parametrize("raw", ["", "not-a-color", "#12345", None])
    def test_unparseable_color_falls_back_to_black(self, raw):
        assert convert_color(raw) == "000000"


class TestConvertSize:
    """Test cases for convert_size."""

    @pytest.mark.parametrize("raw, expected", [
        ("12", 12.0),
        ("12pt", 12.0),
        ("20px", 15.0),
        ("1in", 72.0),
        ("2em", 24.0),
        ("-4", -4.0),
        (" 1.5 pt ", 1.5),
        (".5in", 36.0),
    ])
    def test_units(self, raw, expected):
        assert convert_size(raw) == pytest.approx(expected)

    def test_centimeters_and_millimeters(self):
        assert convert_size("1cm") == pytest.approx(convert_size("10mm"))

    def test_percentage_of_container(self):
        assert convert_size("50%", 300.0) == pytest.approx(150.0)

    def test_percentage_without_container(self):
        assert convert_size("50%") == 0.0

    @pytest.mark.parametrize("raw", ["", "abc", "12furlongs", None])
    def test_unparseable_size(self, raw):
        assert convert_size(raw) == 0.0


class TestScalarConverters:
    """Test cases for float, symbol, quote and copy converters."""

    def test_convert_float(self):
        assert convert_float(" 1.25 ") == 1.25
        assert convert_float("wide") == 0.0

    def test_convert_symbol(self):
        assert convert_symbol(" Center ") == "center"
        assert convert_symbol("line-through") == "line_through"

    @pytest.mark.parametrize("raw, expected", [
        ('"Times New Roman"', "Times New Roman"),
        ("'Courier'", "Courier"),
        ("Helvetica", "Helvetica"),
        ("'mismatched\"", "'mismatched\""),
        ('"', '"'),
    ])
    def test_unquote(self, raw, expected):
        assert unquote(raw) == expected

    def test_copy_value_is_identity(self):
        value = "https://example.com/a?b=1"
        assert copy_value(value) is value


class TestNormalizeStyle:
    """Test cases for normalize_style."""

    @pytest.mark.parametrize("raw, expected", [
        ("bold", "bold"),
        ("700", "bold"),
        ("Italic", "italic"),
        ("oblique", "italic"),
        ("underline", "underline"),
        ("line-through", "strikethrough"),
        ("sub", "subscript"),
        ("super", "superscript"),
    ])
    def test_known_tokens(self, raw, expected):
        assert normalize_style(raw) == expected

    @pytest.mark.parametrize("raw", ["normal", "400", "blink", ""])
    def test_unknown_tokens_are_dropped(self, raw):
        assert normalize_style(raw) is None

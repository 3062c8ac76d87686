"""
Tests for element kinds and their render hooks.
"""

import pytest

from html_interpreter.engine.document_renderer import DocumentRenderer
from html_interpreter.parser.html_parser import parse_html
from html_interpreter.styles.style_resolver import resolve
from html_interpreter.tags.custom_renders import format_marker, parse_dash
from html_interpreter.tags.element_kinds import TAG_KINDS, kind_for


class TestKindFor:
    """Test cases for the tag lookup table."""

    def test_bold_contributes_bold_style(self):
        kind = kind_for("b")

        assert not kind.is_block
        assert resolve(kind.default_styles).styles == ["bold"]

    def test_lookup_is_case_insensitive(self):
        assert kind_for("DIV") is TAG_KINDS["div"]

    @pytest.mark.parametrize("tag", ["blink", "", None])
    def test_unknown_tag(self, tag):
        assert kind_for(tag) is None

    @pytest.mark.parametrize("tag", ["p", "div", "h1", "ul", "ol", "li", "pre", "blockquote", "hr", "img"])
    def test_block_tags(self, tag):
        assert kind_for(tag).is_block

    @pytest.mark.parametrize("tag", ["a", "span", "em", "code", "br", "mark"])
    def test_inline_tags(self, tag):
        assert not kind_for(tag).is_block

    def test_heading_styles(self):
        style = resolve(kind_for("h2").default_styles)

        assert style.size == 24.0
        assert style.styles == ["bold"]
        assert style.margin_top > 0
        assert style.margin_bottom > 0

    def test_link_takes_href_from_attributes(self):
        kind = kind_for("a")

        assert kind.extra_styles({"href": "https://example.com"}) == {"href": "https://example.com"}
        assert kind.extra_styles({}) == {}

    def test_font_attributes(self):
        kind = kind_for("font")

        assert kind.extra_styles({"color": "red", "face": "Courier"}) == {
            "color": "red",
            "font-family": "Courier",
        }


class TestListMarkers:
    """Test cases for list item markers."""

    @pytest.mark.parametrize("style,number,expected", [
        ("disc", 1, "• "),
        ("circle", 2, "◦ "),
        ("square", 3, "▪ "),
        ("decimal", 7, "7. "),
        ("lower-alpha", 28, "ab. "),
        ("upper-alpha", 3, "C. "),
        ("lower-roman", 14, "xiv. "),
        ("upper-roman", 4, "IV. "),
        ("none", 1, ""),
        (None, 1, "• "),
        ("unknown", 1, "• "),
    ])
    def test_format_marker(self, style, number, expected):
        assert format_marker(style, number) == expected

    def test_ordered_list_numbers_items(self, writer):
        renderer = DocumentRenderer(writer)
        renderer.on_tag_open("ol", {"start": "3"})
        for text in ("One", "Two"):
            renderer.on_tag_open("li")
            renderer.on_text_node(text)
            renderer.on_tag_close()
        renderer.on_tag_close()

        assert [writer.text_of(call) for call in writer.puts] == ["3. One", "4. Two"]

    def test_unordered_list_uses_bullets(self, writer):
        renderer = DocumentRenderer(writer)
        renderer.on_tag_open("ul")
        renderer.on_tag_open("li")
        renderer.on_text_node("Item")
        renderer.on_tag_close()
        renderer.on_tag_close()

        assert writer.text_of(writer.puts[0]) == "• Item"

    def test_list_items_are_indented(self, writer):
        renderer = DocumentRenderer(writer)
        renderer.on_tag_open("ul")
        renderer.on_tag_open("li")
        renderer.on_text_node("Item")
        renderer.on_tag_close()

        assert writer.puts[0][2]["indent_paragraphs"] == 25.0

    def test_marker_prefixes_nested_paragraph(self, writer):
        parse_html("<ul><li><p>x</p></li></ul>", DocumentRenderer(writer))

        assert writer.text_of(writer.puts[0]) == "• x"

    def test_marker_is_used_once_per_item(self, writer):
        parse_html("<ol><li><p>a</p><p>b</p></li><li>c</li></ol>", DocumentRenderer(writer))

        assert [writer.text_of(call) for call in writer.puts] == ["1. a", "b", "2. c"]


class TestHorizontalRule:
    """Test cases for the horizontal rule hook."""

    @pytest.mark.parametrize("value,expected", [
        ("3", 3.0),
        ("3,2", [3.0, 2.0]),
        ("", None),
        (None, None),
        ("x,y", None),
    ])
    def test_parse_dash(self, value, expected):
        assert parse_dash(value) == expected

    def test_rule_uses_color_and_dash(self, writer):
        renderer = DocumentRenderer(writer)
        renderer.on_tag_open("hr", {"style": "color: red", "data-dash": "3,2"})

        assert writer.named("horizontal_rule") == [("horizontal_rule", "ff0000", [3.0, 2.0])]

    def test_plain_rule(self, writer):
        renderer = DocumentRenderer(writer)
        renderer.on_tag_open("hr")

        assert writer.named("horizontal_rule") == [("horizontal_rule", None, None)]


class TestImage:
    """Test cases for the image hook."""

    def test_image_sizes_and_position(self, writer):
        renderer = DocumentRenderer(writer)
        renderer.on_tag_open("div", {"style": "text-align: center"})
        renderer.on_tag_open("img", {"src": "logo.png", "width": "100", "style": "height: 50%"})

        assert writer.named("image") == [
            ("image", "logo.png", {"width": 75.0, "height": 350.0, "position": "center"})
        ]

    def test_image_without_size(self, writer):
        renderer = DocumentRenderer(writer)
        renderer.on_tag_open("img", {"src": "logo.png"})

        assert writer.named("image") == [("image", "logo.png", {})]

    def test_image_without_src_is_skipped(self, writer):
        renderer = DocumentRenderer(writer)
        renderer.on_tag_open("img", {"alt": "nothing"})

        assert writer.named("image") == []

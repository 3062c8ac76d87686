"""
Tests for element frames and the context stack.
"""

from html_interpreter.engine.context import ContextStack, ElementFrame, extract_data
from html_interpreter.tags.element_kinds import kind_for


def make_frame(tag, attributes=None, element_styles=''):
    return ElementFrame.build(tag, kind_for(tag), attributes, element_styles)


class TestExtractData:
    """Test cases for data-* extraction."""

    def test_only_data_attributes_are_kept(self):
        assert extract_data({"data-id": " 42 ", "class": "x"}) == {"id": "42"}

    def test_bare_prefix_is_ignored(self):
        assert extract_data({"data-": "x", "data-dash": "3"}) == {"dash": "3"}

    def test_empty_value(self):
        assert extract_data({"data-flag": None}) == {"flag": ""}


class TestElementFrame:
    """Test cases for own-style resolution."""

    def test_kind_defaults(self):
        frame = make_frame("p")

        assert frame.own_style.margin_top == 6.0
        assert frame.is_block

    def test_inline_style_wins_over_document_styles(self):
        frame = make_frame("p", {"style": "margin-top: 20"}, "margin-top: 12; color: red")

        assert frame.own_style.margin_top == 20.0
        assert frame.own_style.color == "ff0000"

    def test_document_styles_win_over_attribute_styles(self):
        frame = make_frame("font", {"color": "blue"}, "color: green")

        assert frame.own_style.color == "008000"

    def test_attribute_styles_win_over_kind_defaults(self):
        frame = make_frame("a", {"href": "https://example.com", "style": "color: red"})

        assert frame.own_style.link == "https://example.com"
        assert frame.own_style.color == "ff0000"
        assert frame.own_style.styles == ["underline"]

    def test_attributes_are_copied(self):
        attributes = {"data-id": "7"}

        frame = make_frame("div", attributes)
        frame.attributes["extra"] = "1"

        assert "extra" not in attributes
        assert frame.data == {"id": "7"}


class TestContextStack:
    """Test cases for ContextStack."""

    def test_push_cascades_from_parent(self):
        stack = ContextStack()
        stack.push(make_frame("div", {"style": "color: red; margin-top: 8"}))
        child = stack.push(make_frame("span"))

        assert child.effective_style.color == "ff0000"
        assert child.effective_style.margin_top is None
        assert len(stack) == 2
        assert stack.top is child

    def test_pop_empty_stack(self):
        stack = ContextStack()

        assert stack.pop() is None
        assert stack.top is None

    def test_current_text_styles(self):
        stack = ContextStack()
        stack.push(make_frame("p", {"style": "color: red; text-align: right"}))
        stack.push(make_frame("b"))

        assert stack.current_text_styles() == {"color": "ff0000", "styles": ["bold"]}

    def test_current_text_styles_without_frames(self):
        assert ContextStack().current_text_styles() == {}

    def test_block_styles_come_from_nearest_block(self):
        stack = ContextStack()
        stack.push(make_frame("div", {"style": "text-align: right"}))
        stack.push(make_frame("p", {"style": "text-align: center"}))
        stack.push(make_frame("span", {"style": "text-align: left"}))

        assert stack.current_block_styles() == {"align": "center"}

    def test_block_styles_without_block(self):
        stack = ContextStack()
        stack.push(make_frame("span"))

        assert stack.current_block_styles() == {}

    def test_before_content_is_consumed_once(self):
        stack = ContextStack()
        stack.push(make_frame("ul"))
        stack.push(make_frame("li"))
        stack.push(make_frame("b"))

        assert stack.take_before_content() == "• "
        assert stack.take_before_content() == ""

    def test_before_content_reaches_nested_blocks(self):
        stack = ContextStack()
        stack.push(make_frame("ul"))
        stack.push(make_frame("li"))
        stack.push(make_frame("p"))

        assert stack.take_before_content() == "• "
        assert stack.take_before_content() == ""

    def test_white_space_preserved(self):
        stack = ContextStack()
        assert not stack.white_space_preserved

        stack.push(make_frame("pre"))
        stack.push(make_frame("span"))

        assert stack.white_space_preserved

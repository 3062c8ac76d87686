"""
Style record and the static property tables.

The tables drive resolution and cascading: every CSS-like property maps to one
canonical record key and a converter, and every key belongs to exactly one
category and merge policy.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from .converters import (
    convert_color,
    convert_float,
    convert_size,
    convert_symbol,
    copy_value,
    normalize_style,
    unquote,
)


class StyleCategory(str, Enum):
    """When a style key takes effect during flow rendering."""

    TEXT_NODE = "text_node"
    TAG_OPEN = "tag_open"
    TAG_CLOSE = "tag_close"
    BLOCK = "block"


class MergePolicy(str, Enum):
    REPLACE = "replace"
    ACCUMULATE = "accumulate"
    APPEND = "append"


class StyleRule(NamedTuple):
    key: str
    converter: Callable[[str], Any]


PROPERTY_RULES: Dict[str, StyleRule] = {
    # text node styles
    'background': StyleRule('background', convert_color),
    'callback': StyleRule('callback', copy_value),
    'color': StyleRule('color', convert_color),
    'font-family': StyleRule('font', unquote),
    'font-size': StyleRule('size', convert_size),
    'font-style': StyleRule('styles', normalize_style),
    'font-weight': StyleRule('styles', normalize_style),
    'href': StyleRule('link', copy_value),
    'letter-spacing': StyleRule('character_spacing', convert_float),
    'list-style-type': StyleRule('list_style_type', unquote),
    'text-decoration': StyleRule('styles', normalize_style),
    'vertical-align': StyleRule('styles', normalize_style),
    'white-space': StyleRule('white_space', convert_symbol),
    # tag opening styles
    'break-before': StyleRule('break_before', convert_symbol),
    'margin-top': StyleRule('margin_top', convert_size),
    'padding-top': StyleRule('padding_top', convert_size),
    # tag closing styles
    'break-after': StyleRule('break_after', convert_symbol),
    'margin-bottom': StyleRule('margin_bottom', convert_size),
    'padding-bottom': StyleRule('padding_bottom', convert_size),
    # block styles
    'left': StyleRule('left', convert_size),
    'line-height': StyleRule('leading', convert_size),
    'margin-left': StyleRule('margin_left', convert_size),
    'padding-left': StyleRule('padding_left', convert_size),
    'position': StyleRule('position', convert_symbol),
    'text-align': StyleRule('align', convert_symbol),
    'top': StyleRule('top', convert_size),
}

KEY_CATEGORIES: Dict[str, StyleCategory] = {
    'background': StyleCategory.TEXT_NODE,
    'callback': StyleCategory.TEXT_NODE,
    'character_spacing': StyleCategory.TEXT_NODE,
    'color': StyleCategory.TEXT_NODE,
    'font': StyleCategory.TEXT_NODE,
    'link': StyleCategory.TEXT_NODE,
    'list_style_type': StyleCategory.TEXT_NODE,
    'size': StyleCategory.TEXT_NODE,
    'styles': StyleCategory.TEXT_NODE,
    'white_space': StyleCategory.TEXT_NODE,
    'break_before': StyleCategory.TAG_OPEN,
    'margin_top': StyleCategory.TAG_OPEN,
    'padding_top': StyleCategory.TAG_OPEN,
    'break_after': StyleCategory.TAG_CLOSE,
    'margin_bottom': StyleCategory.TAG_CLOSE,
    'padding_bottom': StyleCategory.TAG_CLOSE,
    'align': StyleCategory.BLOCK,
    'leading': StyleCategory.BLOCK,
    'left': StyleCategory.BLOCK,
    'margin_left': StyleCategory.BLOCK,
    'padding_left': StyleCategory.BLOCK,
    'position': StyleCategory.BLOCK,
    'top': StyleCategory.BLOCK,
}

KEY_POLICIES: Dict[str, MergePolicy] = {
    'margin_left': MergePolicy.ACCUMULATE,
    'padding_left': MergePolicy.ACCUMULATE,
    'styles': MergePolicy.APPEND,
}

INHERITED_CATEGORIES = (StyleCategory.TEXT_NODE, StyleCategory.BLOCK)


def merge_policy(key: str) -> MergePolicy:
    return KEY_POLICIES.get(key, MergePolicy.REPLACE)


@dataclass
class StyleRecord:
    """Canonical per-element style values; ``None`` means unset."""

    # text node
    background: Optional[str] = None
    callback: Optional[str] = None
    character_spacing: Optional[float] = None
    color: Optional[str] = None
    font: Optional[str] = None
    link: Optional[str] = None
    list_style_type: Optional[str] = None
    size: Optional[float] = None
    styles: List[str] = field(default_factory=list)
    white_space: Optional[str] = None
    # tag open
    break_before: Optional[str] = None
    margin_top: Optional[float] = None
    padding_top: Optional[float] = None
    # tag close
    break_after: Optional[str] = None
    margin_bottom: Optional[float] = None
    padding_bottom: Optional[float] = None
    # block
    align: Optional[str] = None
    leading: Optional[float] = None
    left: Optional[float] = None
    margin_left: Optional[float] = None
    padding_left: Optional[float] = None
    position: Optional[str] = None
    top: Optional[float] = None

    def get(self, key: str) -> Any:
        return getattr(self, key)

    def is_set(self, key: str) -> bool:
        value = getattr(self, key)
        if isinstance(value, list):
            return bool(value)
        return value is not None

    def set_keys(self) -> List[str]:
        return [f.name for f in fields(self) if self.is_set(f.name)]

    def subset(self, category: StyleCategory) -> Dict[str, Any]:
        """Return the set values of one category as a plain dictionary."""
        result: Dict[str, Any] = {}
        for key in self.set_keys():
            if KEY_CATEGORIES[key] is category:
                value = getattr(self, key)
                result[key] = list(value) if isinstance(value, list) else value
        return result

    def copy(self) -> "StyleRecord":
        duplicate = StyleRecord(**{f.name: getattr(self, f.name) for f in fields(self)})
        duplicate.styles = list(self.styles)
        return duplicate

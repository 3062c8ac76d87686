"""
Element kinds: the closed catalogue of supported tags.

Each tag name maps to one :class:`ElementKind` capability record describing
whether it establishes a block, the styles it contributes implicitly and the
hooks it runs when it opens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from .custom_renders import list_item_marker, render_horizontal_rule, render_image


@dataclass(frozen=True)
class ElementKind:
    is_block: bool = False
    default_styles: str = ''
    extra_styles: Optional[Callable[[Mapping[str, str]], Dict[str, str]]] = None
    custom_render: Optional[Callable[[Any, Any], None]] = None
    before_content: Optional[Callable[[Any, Any], str]] = None
    breaks_line: bool = False


def _link_styles(attributes: Mapping[str, str]) -> Dict[str, str]:
    href = attributes.get('href')
    return {'href': href} if href else {}


def _font_styles(attributes: Mapping[str, str]) -> Dict[str, str]:
    styles: Dict[str, str] = {}
    if attributes.get('color'):
        styles['color'] = attributes['color']
    if attributes.get('face'):
        styles['font-family'] = attributes['face']
    return styles


BLOCK = ElementKind(is_block=True)
INLINE = ElementKind()

BOLD = ElementKind(default_styles='font-weight: bold')
ITALIC = ElementKind(default_styles='font-style: italic')
UNDERLINE = ElementKind(default_styles='text-decoration: underline')
STRIKE = ElementKind(default_styles='callback: StrikeThrough')
MONOSPACE = ElementKind(default_styles='font-family: Courier')

HEADING_SIZES = {'h1': 31.5, 'h2': 24, 'h3': 18.5, 'h4': 16, 'h5': 13, 'h6': 10.5}
HEADING_MARGINS_TOP = {'h1': 10.5, 'h2': 10.5, 'h3': 10.5, 'h4': 12, 'h5': 12.5, 'h6': 15.5}
HEADING_MARGINS_BOTTOM = {'h1': 21.2, 'h2': 19.8, 'h3': 18.2, 'h4': 20.5, 'h5': 21.2, 'h6': 24.8}


def _heading(tag: str) -> ElementKind:
    return ElementKind(
        is_block=True,
        default_styles=(
            f"font-size: {HEADING_SIZES[tag]}; font-weight: bold; "
            f"margin-top: {HEADING_MARGINS_TOP[tag]}; margin-bottom: {HEADING_MARGINS_BOTTOM[tag]}"
        ),
    )


TAG_KINDS: Dict[str, ElementKind] = {
    # inline
    'a': ElementKind(default_styles='color: #0000ee; text-decoration: underline', extra_styles=_link_styles),
    'b': BOLD,
    'strong': BOLD,
    'i': ITALIC,
    'em': ITALIC,
    'cite': ITALIC,
    'var': ITALIC,
    'u': UNDERLINE,
    'ins': UNDERLINE,
    's': STRIKE,
    'del': STRIKE,
    'strike': STRIKE,
    'mark': ElementKind(default_styles='background: #ffff00'),
    'small': ElementKind(default_styles='font-size: 8'),
    'sub': ElementKind(default_styles='vertical-align: sub'),
    'sup': ElementKind(default_styles='vertical-align: super'),
    'code': MONOSPACE,
    'kbd': MONOSPACE,
    'span': INLINE,
    'label': INLINE,
    'font': ElementKind(extra_styles=_font_styles),
    'br': ElementKind(breaks_line=True),
    # block
    'body': BLOCK,
    'div': BLOCK,
    'section': BLOCK,
    'article': BLOCK,
    'header': BLOCK,
    'footer': BLOCK,
    'main': BLOCK,
    'nav': BLOCK,
    'aside': BLOCK,
    'p': ElementKind(is_block=True, default_styles='margin-top: 6; margin-bottom: 6'),
    'blockquote': ElementKind(is_block=True, default_styles='margin-left: 25; margin-top: 6; margin-bottom: 6'),
    'pre': ElementKind(
        is_block=True,
        default_styles='font-family: Courier; white-space: pre; margin-top: 6; margin-bottom: 6',
    ),
    'h1': _heading('h1'),
    'h2': _heading('h2'),
    'h3': _heading('h3'),
    'h4': _heading('h4'),
    'h5': _heading('h5'),
    'h6': _heading('h6'),
    'ul': ElementKind(is_block=True, default_styles='list-style-type: disc; margin-left: 25; margin-bottom: 6'),
    'ol': ElementKind(is_block=True, default_styles='list-style-type: decimal; margin-left: 25; margin-bottom: 6'),
    'li': ElementKind(is_block=True, default_styles='margin-top: 2', before_content=list_item_marker),
    'hr': ElementKind(is_block=True, default_styles='margin-top: 6; margin-bottom: 12',
                      custom_render=render_horizontal_rule),
    'img': ElementKind(is_block=True, custom_render=render_image),
}


def kind_for(tag_name: str) -> Optional[ElementKind]:
    """Return the element kind registered for ``tag_name`` or ``None``."""
    return TAG_KINDS.get((tag_name or '').lower())

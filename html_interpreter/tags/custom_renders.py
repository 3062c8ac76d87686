"""Render hooks for elements that inject non-text content, and list markers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from ..styles.converters import convert_size
from ..styles.style_resolver import parse_declarations

if TYPE_CHECKING:
    from ..engine.context import ContextStack, ElementFrame

logger = logging.getLogger(__name__)

BULLETS = {
    'disc': '•',
    'circle': '◦',
    'square': '▪',
}

ROMAN_NUMERALS = [
    (1000, 'm'), (900, 'cm'), (500, 'd'), (400, 'cd'),
    (100, 'c'), (90, 'xc'), (50, 'l'), (40, 'xl'),
    (10, 'x'), (9, 'ix'), (5, 'v'), (4, 'iv'), (1, 'i'),
]

IMAGE_POSITIONS = ('left', 'center', 'right')


def parse_dash(value: Optional[str]) -> Optional[Union[float, List[float]]]:
    """Parse a ``data-dash`` value: ``"3"`` or ``"3,2"``."""
    if not value:
        return None
    try:
        parts = [float(part) for part in value.split(',') if part.strip()]
    except ValueError:
        logger.debug(f"Ignoring invalid dash pattern {value!r}")
        return None
    if not parts:
        return None
    return parts[0] if len(parts) == 1 else parts


def render_horizontal_rule(writer: Any, context: "ContextStack") -> None:
    frame = context.top
    writer.horizontal_rule(
        color=frame.effective_style.color,
        dash=parse_dash(frame.data.get('dash')),
    )


def _image_length(raw: Optional[str], container: float) -> Optional[float]:
    if not raw:
        return None
    raw = raw.strip()
    if raw.isdigit():
        raw = f"{raw}px"
    return convert_size(raw, container) or None


def render_image(writer: Any, context: "ContextStack") -> None:
    frame = context.top
    src = frame.attributes.get('src')
    if not src:
        logger.debug("Skipping <img> without src")
        return

    declared = parse_declarations(frame.attributes.get('style'))
    bounds = writer.bounds
    options: Dict[str, Any] = {}

    width = _image_length(declared.get('width') or frame.attributes.get('width'), bounds.width)
    if width:
        options['width'] = width
    height = _image_length(declared.get('height') or frame.attributes.get('height'), bounds.height)
    if height:
        options['height'] = height

    align = context.current_block_styles().get('align')
    if align in IMAGE_POSITIONS:
        options['position'] = align

    writer.image(src, options)


def _to_roman(number: int) -> str:
    result = ''
    for value, numeral in ROMAN_NUMERALS:
        while number >= value:
            result += numeral
            number -= value
    return result


def _to_alpha(number: int) -> str:
    result = ''
    while number > 0:
        number, remainder = divmod(number - 1, 26)
        result = chr(ord('a') + remainder) + result
    return result


def format_marker(list_style_type: Optional[str], number: int) -> str:
    style = (list_style_type or 'disc').strip().lower()
    if style == 'none':
        return ''
    if style in BULLETS:
        return f"{BULLETS[style]} "
    if style in ('lower-alpha', 'lower-latin'):
        return f"{_to_alpha(number)}. "
    if style in ('upper-alpha', 'upper-latin'):
        return f"{_to_alpha(number).upper()}. "
    if style == 'lower-roman':
        return f"{_to_roman(number)}. "
    if style == 'upper-roman':
        return f"{_to_roman(number).upper()}. "
    if style == 'decimal':
        return f"{number}. "
    return f"{BULLETS['disc']} "


def list_item_marker(frame: "ElementFrame", parent: Optional["ElementFrame"]) -> str:
    """Compute the marker of a list item and advance the parent list counter."""
    if parent is None:
        return format_marker(frame.effective_style.list_style_type, 1)

    if parent.counter is None:
        start = parent.attributes.get('start', '1').strip()
        parent.counter = int(start) - 1 if start.lstrip('-').isdigit() else 0
    parent.counter += 1
    return format_marker(frame.effective_style.list_style_type, parent.counter)

"""
Value converters for style declarations.

Each converter maps a raw declaration value to its canonical form. Converters never
raise on malformed input; they fall back to a converter-specific default instead.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Document base unit is the PDF point
BASE_FONT_SIZE = 12.0

UNIT_FACTORS = {
    '': 1.0,
    'pt': 1.0,
    'px': 0.75,
    'in': 72.0,
    'cm': 28.3465,
    'mm': 2.83465,
    'pc': 12.0,
    'em': BASE_FONT_SIZE,
    'rem': BASE_FONT_SIZE,
}

DEFAULT_COLOR = '000000'

CSS_COLOR_MAP = {
    'aqua': '00ffff',
    'black': '000000',
    'blue': '0000ff',
    'brown': 'a52a2a',
    'cyan': '00ffff',
    'darkblue': '00008b',
    'darkcyan': '008b8b',
    'darkgray': 'a9a9a9',
    'darkgrey': 'a9a9a9',
    'darkgreen': '006400',
    'darkmagenta': '8b008b',
    'darkred': '8b0000',
    'fuchsia': 'ff00ff',
    'gold': 'ffd700',
    'gray': '808080',
    'grey': '808080',
    'green': '008000',
    'lightblue': 'add8e6',
    'lightcyan': 'e0ffff',
    'lightgray': 'd3d3d3',
    'lightgrey': 'd3d3d3',
    'lightgreen': '90ee90',
    'lightyellow': 'ffffe0',
    'lime': '00ff00',
    'magenta': 'ff00ff',
    'maroon': '800000',
    'navy': '000080',
    'olive': '808000',
    'orange': 'ffa500',
    'pink': 'ffc0cb',
    'purple': '800080',
    'red': 'ff0000',
    'silver': 'c0c0c0',
    'teal': '008080',
    'white': 'ffffff',
    'yellow': 'ffff00',
}

# CSS keyword -> internal style token
STYLE_TOKENS = {
    'bold': 'bold',
    'bolder': 'bold',
    '600': 'bold',
    '700': 'bold',
    '800': 'bold',
    '900': 'bold',
    'italic': 'italic',
    'oblique': 'italic',
    'underline': 'underline',
    'line-through': 'strikethrough',
    'sub': 'subscript',
    'super': 'superscript',
}

_HEX_RE = re.compile(r'^#?([0-9a-f]{3}|[0-9a-f]{6})$')
_RGB_RE = re.compile(r'^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,[^)]*)?\)$')
_SIZE_RE = re.compile(r'^([-+]?(?:\d+\.?\d*|\.\d+))\s*([a-z%]*)$')


def convert_color(value: str) -> str:
    """Normalize a hex, rgb() or named colour to six lower-case hex digits."""
    token = (value or '').strip().lower()

    if token in CSS_COLOR_MAP:
        return CSS_COLOR_MAP[token]

    match = _HEX_RE.match(token)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = ''.join(ch * 2 for ch in digits)
        return digits

    match = _RGB_RE.match(token)
    if match:
        return ''.join(f"{min(int(part), 255):02x}" for part in match.groups())

    logger.debug(f"Unparseable color {value!r}, using {DEFAULT_COLOR}")
    return DEFAULT_COLOR


def convert_size(value: str, container_size: Optional[float] = None) -> float:
    """
    Convert a length with an optional unit suffix to points.

    Args:
        value: Raw length such as ``"12"``, ``"10px"`` or ``"50%"``
        container_size: Reference size for percentages

    Returns:
        Length in points, ``0.0`` when the value cannot be parsed
    """
    token = (value or '').strip().lower()
    match = _SIZE_RE.match(token)
    if not match:
        logger.debug(f"Unparseable size {value!r}")
        return 0.0

    number = float(match.group(1))
    unit = match.group(2)

    if unit == '%':
        return number * container_size / 100.0 if container_size else 0.0

    factor = UNIT_FACTORS.get(unit)
    if factor is None:
        logger.debug(f"Unknown unit {unit!r} in {value!r}")
        return 0.0
    return number * factor


def convert_float(value: str) -> float:
    try:
        return float((value or '').strip())
    except ValueError:
        logger.debug(f"Unparseable number {value!r}")
        return 0.0


def convert_symbol(value: str) -> str:
    """Lower-case a keyword into an internal symbol (``line-through`` -> ``line_through``)."""
    return (value or '').strip().lower().replace('-', '_')


def unquote(value: str) -> str:
    text = (value or '').strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ('"', "'"):
        return text[1:-1]
    return text


def copy_value(value: Any) -> Any:
    return value


def normalize_style(value: str) -> Optional[str]:
    """Map a font-weight/font-style/text-decoration/vertical-align keyword to a style token."""
    return STYLE_TOKENS.get((value or '').strip().lower())

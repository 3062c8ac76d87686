"""Utility helpers shared across writer components."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union

from reportlab.lib.colors import Color, HexColor
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.pagesizes import A3, A4, A5, LEGAL, LETTER, landscape
from reportlab.pdfbase import pdfmetrics

from ..engine.geometry import Margins, Size

PAGE_SIZES = {
    "A3": A3,
    "A4": A4,
    "A5": A5,
    "LEGAL": LEGAL,
    "LETTER": LETTER,
}

DEFAULT_MARGINS = (50.0, 50.0, 50.0, 50.0)

ALIGNMENTS = {
    "left": TA_LEFT,
    "center": TA_CENTER,
    "right": TA_RIGHT,
    "justify": TA_JUSTIFY,
}

FONT_ALIASES = {
    "arial": "Helvetica",
    "helvetica": "Helvetica",
    "sans-serif": "Helvetica",
    "verdana": "Helvetica",
    "times": "Times-Roman",
    "times new roman": "Times-Roman",
    "times-roman": "Times-Roman",
    "serif": "Times-Roman",
    "georgia": "Times-Roman",
    "courier": "Courier",
    "courier new": "Courier",
    "monospace": "Courier",
}


def ensure_page_size(page_size: Union[str, Size, Iterable[float], None]) -> Tuple[float, float]:
    """
    Resolve a page size to ``(width, height)`` in points.

    Accepts a preset name, optionally suffixed with ``landscape``
    (``"A4"``, ``"letter landscape"``, ``"A5-landscape"``), a :class:`Size` or a
    ``(width, height)`` pair. ``None`` selects A4.
    """
    if page_size is None:
        return float(A4[0]), float(A4[1])

    if isinstance(page_size, Size):
        return float(page_size.width), float(page_size.height)

    if isinstance(page_size, str):
        name, _, orientation = page_size.strip().upper().replace("-", " ").partition(" ")
        preset = PAGE_SIZES.get(name)
        if preset is None or orientation.strip() not in ("", "PORTRAIT", "LANDSCAPE"):
            raise ValueError(f"Unsupported page size preset: {page_size}")
        if orientation.strip() == "LANDSCAPE":
            preset = landscape(preset)
        return float(preset[0]), float(preset[1])

    values = [float(value) for value in page_size]
    if len(values) != 2 or min(values) <= 0:
        raise ValueError("Page size must be two positive values (width, height)")
    return values[0], values[1]


def ensure_margins(margins: Union[Margins, float, Iterable[float], None]) -> Margins:
    """
    Resolve page margins given like the CSS ``margin`` shorthand.

    One value applies to every side; two are vertical and horizontal; three are
    top, horizontal and bottom; four are top, right, bottom and left.
    """
    if margins is None:
        return Margins(*DEFAULT_MARGINS)
    if isinstance(margins, Margins):
        return margins
    if isinstance(margins, (int, float)):
        values = [float(margins)]
    else:
        values = [float(value) for value in margins]

    if len(values) == 1:
        top = right = bottom = left = values[0]
    elif len(values) == 2:
        top = bottom = values[0]
        right = left = values[1]
    elif len(values) == 3:
        top, right, bottom = values
        left = right
    elif len(values) == 4:
        top, right, bottom, left = values
    else:
        raise ValueError("Margins take one to four values (top, right, bottom, left)")
    return Margins(top=top, right=right, bottom=bottom, left=left)


def to_color(value: Optional[str], fallback: str = "#000000") -> Color:
    """Convert six hex digits (with or without ``#``) to a ReportLab colour."""
    if not value:
        return HexColor(fallback)
    token = value if value.startswith("#") else f"#{value}"
    try:
        return HexColor(token)
    except ValueError:
        return HexColor(fallback)


def resolve_font_name(family: Optional[str], default: str = "Helvetica") -> str:
    """Map a CSS font family list to a font known to ReportLab."""
    if not family:
        return default

    for candidate in family.split(","):
        name = candidate.strip().strip("'\"")
        alias = FONT_ALIASES.get(name.lower())
        if alias:
            return alias
        try:
            pdfmetrics.getFont(name)
        except (KeyError, ValueError, OSError):
            continue
        return name
    return default

"""Render options for HTML Interpreter."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional, Tuple, Type, Union

from .engine.callbacks import RunCallback

PageSize = Union[str, Tuple[float, float]]


@dataclass
class RenderOptions:
    """
    Options for rendering HTML to PDF.

    Attributes:
        page_size: Preset name ("A4", "LETTER") or (width, height) in points
        margins: Page margins in points, one to four values like CSS margin
        font_name: Default font for runs without a font-family
        font_size: Default font size in points
        tag_styles: Document styles per tag name, e.g. {"p": "margin-bottom: 8"}
        callbacks: Run callback registry; None selects the default callbacks
    """

    page_size: PageSize = "A4"
    margins: Tuple[float, ...] = (50.0, 50.0, 50.0, 50.0)
    font_name: str = "Helvetica"
    font_size: float = 12.0
    tag_styles: Dict[str, str] = field(default_factory=dict)
    callbacks: Optional[Dict[str, Type[RunCallback]]] = None

    @classmethod
    def from_dict(cls, values: Optional[Mapping[str, Any]]) -> "RenderOptions":
        """Build options from a mapping; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        options = {key: value for key, value in (values or {}).items() if key in known}
        margins = options.get('margins')
        if isinstance(margins, (int, float)):
            options['margins'] = (float(margins),)
        elif margins is not None:
            options['margins'] = tuple(float(value) for value in margins)
        if isinstance(options.get('page_size'), list):
            options['page_size'] = tuple(options['page_size'])
        return cls(**options)

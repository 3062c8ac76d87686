"""
High-level API for rendering HTML.

Usage:
    from html_interpreter import render_html_to_pdf

    render_html_to_pdf("<h1>Title</h1><p>Body</p>", "out.pdf")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from .config import RenderOptions
from .engine.document_renderer import DocumentRenderer
from .exceptions import ParsingError
from .parser.html_parser import parse_html
from .renderers.pdf_writer import CanvasTarget, PdfWriter

logger = logging.getLogger(__name__)


def render_html(markup: str, writer: Any, options: Optional[RenderOptions] = None) -> DocumentRenderer:
    """
    Render markup through any document writer.

    Args:
        markup: HTML text
        writer: Object implementing the document writer operations
        options: Render options (tag styles and callbacks are used here)

    Returns:
        The flow renderer after the final flush
    """
    if not isinstance(markup, str):
        raise ParsingError("Markup must be a string", details=type(markup).__name__)

    options = options or RenderOptions()
    renderer = DocumentRenderer(writer, callbacks=options.callbacks)
    parse_html(markup, renderer, tag_styles=options.tag_styles)
    return renderer


def render_html_to_pdf(markup: str, output: CanvasTarget, options: Optional[RenderOptions] = None) -> int:
    """
    Render markup to a PDF file or binary stream.

    Returns:
        Number of pages written
    """
    options = options or RenderOptions()
    writer = PdfWriter(
        output,
        page_size=options.page_size,
        margins=options.margins,
        font_name=options.font_name,
        font_size=options.font_size,
    )
    render_html(markup, writer, options)
    writer.save()
    logger.info(f"Rendered {writer.page_count} page(s)")
    return writer.page_count


def render_file_to_pdf(input_path: Union[str, Path], output_path: Union[str, Path, None] = None,
                       options: Optional[RenderOptions] = None) -> Path:
    """Render an HTML file; the output defaults to the input path with a .pdf suffix."""
    source = Path(input_path)
    try:
        markup = source.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParsingError("Input is not valid UTF-8", details=str(source)) from exc

    target = Path(output_path) if output_path else source.with_suffix(".pdf")
    render_html_to_pdf(markup, str(target), options)
    return target

"""
HTML Interpreter - render styled HTML markup to PDF.

The package resolves inline CSS-like declarations along the element tree and
lays the document out as a flow of text blocks:

- Styles: value converters, the style record and the cascade resolver
- Tags: the catalogue of supported elements
- Engine: context stack and the flow renderer state machine
- Parser: HTML event driver
- Renderers: document writers (ReportLab PDF)

Quick Start:
    from html_interpreter import render_html_to_pdf

    render_html_to_pdf('<p style="text-align: center">Hello</p>', "hello.pdf")
"""

from .version import __version__, __version_info__

from .exceptions import (
    HtmlInterpreterError,
    ParsingError,
    StyleError,
    RenderingError,
    GeometryError,
)
from .config import RenderOptions
from .engine import ContextStack, DocumentRenderer, ElementFrame, PendingRun
from .styles import StyleRecord, parse_declarations, resolve
from .tags import ElementKind, kind_for
from .parser import HtmlEventParser, parse_html
from .renderers import IDocumentWriter, PdfWriter
from .api import render_file_to_pdf, render_html, render_html_to_pdf

__all__ = [
    # Version
    "__version__",
    "__version_info__",

    # High-level API
    "render_html",
    "render_html_to_pdf",
    "render_file_to_pdf",
    "RenderOptions",

    # Engine
    "ContextStack",
    "DocumentRenderer",
    "ElementFrame",
    "PendingRun",
    "StyleRecord",
    "parse_declarations",
    "resolve",
    "ElementKind",
    "kind_for",
    "HtmlEventParser",
    "parse_html",
    "IDocumentWriter",
    "PdfWriter",

    # Exceptions
    "HtmlInterpreterError",
    "ParsingError",
    "StyleError",
    "RenderingError",
    "GeometryError",
]


def main():
    """CLI entry point."""
    from .cli import main as cli_main
    return cli_main()

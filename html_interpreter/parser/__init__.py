"""
Parser module: markup event drivers for the flow renderer.
"""

from .html_parser import HtmlEventParser, parse_html

__all__ = [
    "HtmlEventParser",
    "parse_html",
]

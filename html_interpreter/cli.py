"""
Command-line interface for HTML Interpreter.

Usage:
    html-interpreter page.html --output page.pdf
    html-interpreter page.html --page-size LETTER --margins 36 36 36 36
    html-interpreter --version
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .exceptions import HtmlInterpreterError
from .utils.logger import configure_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="html-interpreter",
        description="HTML Interpreter - render styled HTML to PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  html-interpreter page.html
  html-interpreter page.html -o out.pdf --page-size LETTER
  html-interpreter page.html --page-size "A4 landscape" --margins 36 54
  html-interpreter page.html --font Times-Roman --font-size 11
        """,
    )

    parser.add_argument("input", nargs="?", help="Input HTML file")
    parser.add_argument(
        "-o", "--output",
        help="Output PDF path (default: input name with .pdf extension)"
    )
    parser.add_argument(
        "--page-size",
        default="A4",
        help="Page size preset: A3, A4, A5, LETTER or LEGAL, optionally \"landscape\" (default: A4)"
    )
    parser.add_argument(
        "--margins",
        nargs="+",
        type=float,
        metavar="POINTS",
        default=[50.0, 50.0, 50.0, 50.0],
        help="Page margins in points, one to four values like CSS margin (default: 50)"
    )
    parser.add_argument("--font", default="Helvetica", help="Default font (default: Helvetica)")
    parser.add_argument("--font-size", type=float, default=12.0, help="Default font size in points")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--version", action="store_true", help="Show version and exit")

    return parser


def cmd_version() -> int:
    """Handle --version."""
    from .version import __version__
    print(f"HTML Interpreter v{__version__}")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """Render the input file to PDF."""
    from .api import render_file_to_pdf
    from .config import RenderOptions

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    options = RenderOptions(
        page_size=args.page_size,
        margins=tuple(args.margins),
        font_name=args.font,
        font_size=args.font_size,
    )

    try:
        output_path = render_file_to_pdf(input_path, args.output, options)
    except (HtmlInterpreterError, OSError, ValueError) as exc:
        logger.error(f"Rendering failed: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Saved: {output_path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "WARNING", log_file=args.log_file)

    if args.version:
        return cmd_version()

    if len(args.margins) > 4:
        parser.error("--margins takes one to four values")

    if not args.input:
        parser.print_help()
        return 0

    return cmd_render(args)


if __name__ == "__main__":
    sys.exit(main() or 0)

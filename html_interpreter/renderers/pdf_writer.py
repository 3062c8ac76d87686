"""
ReportLab document writer.

Keeps a cursor measured from the bottom of the writable area, lays each block of
runs out as a ReportLab ``Paragraph`` and moves to a new page when a block does
not fit.
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Any, Dict, List, Optional, Sequence, Union
from xml.sax.saxutils import escape, quoteattr

from reportlab.lib.enums import TA_LEFT
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen.canvas import Canvas
from reportlab.platypus import Paragraph

from ..engine.geometry import Margins, Size
from ..exceptions import GeometryError, RenderingError
from .base_writer import BoundingBox, IDocumentWriter
from .render_utils import ALIGNMENTS, ensure_margins, ensure_page_size, resolve_font_name, to_color

logger = logging.getLogger(__name__)

CanvasTarget = Union[str, BytesIO]

LINE_HEIGHT_FACTOR = 1.2
PX_TO_PT = 0.75

TOKEN_TAGS = (
    ('bold', 'b'),
    ('italic', 'i'),
    ('underline', 'u'),
    ('strikethrough', 'strike'),
    ('subscript', 'sub'),
    ('superscript', 'super'),
)


def run_markup(run: Any) -> str:
    """Convert one buffered run to ReportLab paragraph markup."""
    if run.marker:
        return '<br/>' if run.text == '\n' else ' '

    styles = run.styles
    text = escape(run.text)
    if styles.get('white_space') in ('pre', 'pre_wrap'):
        text = text.replace(' ', '&nbsp;')
    text = text.replace('\n', '<br/>')

    tokens = styles.get('styles') or []
    for token, tag in TOKEN_TAGS:
        if token in tokens:
            text = f"<{tag}>{text}</{tag}>"

    font_attrs: List[str] = []
    if styles.get('font'):
        font_attrs.append(f'name="{resolve_font_name(styles["font"])}"')
    if styles.get('size'):
        font_attrs.append(f'size="{styles["size"]:g}"')
    if styles.get('color'):
        font_attrs.append(f'color="#{styles["color"]}"')
    if styles.get('background'):
        font_attrs.append(f'backColor="#{styles["background"]}"')
    if font_attrs:
        text = f"<font {' '.join(font_attrs)}>{text}</font>"

    if styles.get('link'):
        text = f"<a href={quoteattr(styles['link'])}>{text}</a>"

    if run.callback is not None:
        text = run.callback.decorate(text)
    return text


def runs_to_markup(runs: Sequence[Any]) -> str:
    return ''.join(run_markup(run) for run in runs)


class PdfWriter(IDocumentWriter):
    """Write flow blocks onto ReportLab canvas pages."""

    def __init__(
        self,
        output: CanvasTarget,
        page_size: Any = "A4",
        margins: Any = (50, 50, 50, 50),
        font_name: str = "Helvetica",
        font_size: float = 12.0,
    ) -> None:
        width, height = ensure_page_size(page_size)
        self.page_size = (width, height)
        self.page_width = width
        self.page_height = height
        self.margins: Margins = ensure_margins(margins)
        self.font_name = font_name
        self.font_size = font_size

        if hasattr(output, "write"):
            self.canvas = Canvas(output, pagesize=self.page_size)
        else:
            self.canvas = Canvas(str(output), pagesize=self.page_size)

        self.page_count = 1
        self.cursor = self.content_height

    @property
    def content_width(self) -> float:
        return max(self.page_width - self.margins.horizontal, 0.0)

    @property
    def content_height(self) -> float:
        return max(self.page_height - self.margins.vertical, 0.0)

    @property
    def bounds(self) -> Size:
        return Size(width=self.content_width, height=self.content_height)

    # ------------------------------------------------------------------
    # Cursor and pages
    # ------------------------------------------------------------------
    def advance_cursor(self, amount: float) -> None:
        self.cursor = min(self.cursor - amount, self.content_height)
        if self.cursor < 0:
            self.start_new_page()

    def start_new_page(self) -> None:
        self.canvas.showPage()
        self.page_count += 1
        self.cursor = self.content_height
        logger.debug(f"Started page {self.page_count}")

    def save(self) -> None:
        self.canvas.save()

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------
    def put(self, runs: Sequence[Any], options: Dict[str, Any],
            bounding_box: Optional[BoundingBox] = None) -> None:
        """
        Write one block of runs.

        ``indent_paragraphs`` already includes the block's left padding, so
        ``padding_left`` is not applied a second time.
        """
        markup = runs_to_markup(runs)
        if not markup:
            return

        paragraph = Paragraph(markup, self._paragraph_style(runs, options))
        if bounding_box is None:
            self._flow_paragraph(paragraph)
        else:
            self._place_paragraph(paragraph, bounding_box)

    def horizontal_rule(self, color: Optional[str] = None, dash: Any = None) -> None:
        y = self.margins.bottom + self.cursor
        self.canvas.saveState()
        self.canvas.setStrokeColor(to_color(color))
        if dash:
            self.canvas.setDash(dash)
        self.canvas.line(self.margins.left, y, self.margins.left + self.content_width, y)
        self.canvas.restoreState()

    def image(self, src: str, options: Dict[str, Any]) -> None:
        try:
            reader = ImageReader(src)
            image_width, image_height = reader.getSize()
        except Exception as exc:
            raise RenderingError("Cannot load image", details=str(src)) from exc

        width, height = self._image_size(image_width, image_height, options, src)
        if height > self.cursor:
            self.start_new_page()

        x = self.margins.left
        position = options.get('position')
        if position == 'center':
            x += (self.content_width - width) / 2
        elif position == 'right':
            x += self.content_width - width

        self.canvas.drawImage(
            reader,
            x,
            self.margins.bottom + self.cursor - height,
            width=width,
            height=height,
            mask="auto",
        )
        self.cursor -= height

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _paragraph_style(self, runs: Sequence[Any], options: Dict[str, Any]) -> ParagraphStyle:
        sizes = [run.styles['size'] for run in runs if run.styles.get('size')]
        largest = max(sizes + [self.font_size])
        return ParagraphStyle(
            name="flow",
            fontName=self.font_name,
            fontSize=self.font_size,
            leading=largest * LINE_HEIGHT_FACTOR + (options.get('leading') or 0.0),
            alignment=ALIGNMENTS.get(options.get('align'), TA_LEFT),
            leftIndent=options.get('indent_paragraphs', 0.0),
        )

    def _flow_paragraph(self, paragraph: Paragraph) -> None:
        pending = [paragraph]
        while pending:
            current = pending.pop(0)
            _, height = current.wrap(self.content_width, self.cursor)
            if height <= self.cursor:
                current.drawOn(self.canvas, self.margins.left, self.margins.bottom + self.cursor - height)
                self.cursor -= height
                continue

            parts = current.split(self.content_width, self.cursor)
            if len(parts) > 1:
                pending = list(parts) + pending
                continue

            if self.cursor >= self.content_height:
                raise GeometryError(
                    "Block does not fit on an empty page",
                    details=f"{height:.1f}pt needed, {self.content_height:.1f}pt available",
                )
            self.start_new_page()
            pending.insert(0, current)

    def _place_paragraph(self, paragraph: Paragraph, bounding_box: BoundingBox) -> None:
        (x, y), box = bounding_box
        width = box.get('width', self.content_width)
        if width <= 0:
            raise GeometryError("Bounding box has no width", details=f"left offset {x:.1f}pt")

        _, height = paragraph.wrap(width, y)
        paragraph.drawOn(self.canvas, self.margins.left + x, self.margins.bottom + y - height)

    def _image_size(self, image_width: float, image_height: float, options: Dict[str, Any], src: str):
        if image_width <= 0 or image_height <= 0:
            raise RenderingError("Image has no size", details=str(src))

        width = options.get('width')
        height = options.get('height')
        if (width is not None and width <= 0) or (height is not None and height <= 0):
            raise RenderingError("Image size must be positive", details=f"{src}: {width} x {height}")
        if width and not height:
            height = image_height * width / image_width
        elif height and not width:
            width = image_width * height / image_height
        elif not width and not height:
            width, height = image_width * PX_TO_PT, image_height * PX_TO_PT

        scale = min(1.0, self.content_width / width, self.content_height / height)
        return width * scale, height * scale

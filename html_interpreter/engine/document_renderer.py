"""
Flow renderer.

Consumes open/text/close events in document order, buffers text runs with their
resolved text styles and writes one positioned block to the document writer at
every block boundary.
"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from ..styles.converters import convert_size
from ..styles.style_record import StyleCategory
from ..tags.element_kinds import kind_for
from .callbacks import DEFAULT_CALLBACKS, RunCallback
from .context import ContextStack, ElementFrame

logger = logging.getLogger(__name__)

BoundingBox = Tuple[Tuple[float, float], Dict[str, float]]

BLOCK_OPTION_KEYS = ('align', 'leading', 'mode', 'padding_left')
NO_BREAK_VALUES = ('auto', 'avoid', 'avoid_page', 'avoid_column')

# Vertical gap of a line break with no pending text
BR_SPACING = convert_size('17px')

# HTML whitespace only: U+00A0 must survive normalization
_WHITESPACE = ' \t\n\r\f'
_WHITESPACE_RUN = re.compile(r'[ \t\n\r\f]+')


@dataclass
class PendingRun:
    """One buffered item: a styled text run or a structural marker."""

    text: str
    styles: Dict[str, Any] = field(default_factory=dict)
    marker: bool = False
    callback: Optional[RunCallback] = None


NEW_LINE = PendingRun('\n', marker=True)
SPACE = PendingRun(' ', marker=True)


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs, newlines included, to one space and trim the ends."""
    return _WHITESPACE_RUN.sub(' ', text).strip(_WHITESPACE)


class DocumentRenderer:
    """Flow renderer state machine; one instance per document."""

    def __init__(self, writer: Any, callbacks: Optional[Mapping[str, Type[RunCallback]]] = None) -> None:
        self.writer = writer
        self.callbacks: Dict[str, Type[RunCallback]] = dict(DEFAULT_CALLBACKS if callbacks is None else callbacks)
        self.context = ContextStack()
        self.buffer: List[PendingRun] = []
        # one entry per open event: whether it pushed a frame
        self._opened: List[bool] = []

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def on_tag_open(self, tag_name: str, attributes: Optional[Mapping[str, str]] = None,
                    element_styles: Optional[str] = '') -> Optional[ElementFrame]:
        """
        Open an element.

        Args:
            tag_name: Tag name of the opening element
            attributes: Element attributes, including ``style`` and ``data-*``
            element_styles: Document styles that apply to the element

        Returns:
            The pushed frame, or ``None`` for unsupported tags
        """
        kind = kind_for(tag_name)
        if kind is None:
            logger.debug(f"Unsupported tag <{tag_name}> skipped")
            self._opened.append(False)
            return None

        frame = ElementFrame.build(tag_name.lower(), kind, attributes, element_styles)
        if not self._render_if_needed(frame) and not kind.breaks_line:
            self._add_space_if_needed()

        self._opened.append(True)
        self.context.push(frame)
        self._apply_tag_open_styles(frame)

        if kind.breaks_line:
            self._break_line()
        if kind.custom_render is not None:
            kind.custom_render(self.writer, self.context)
        return frame

    def on_text_node(self, content: str) -> None:
        if not content or not content.strip(_WHITESPACE):
            return

        preserved = self.context.white_space_preserved
        text = self._prepare_text(content, preserved)

        if not preserved and content[0] in _WHITESPACE and self.buffer and not self.buffer[-1].marker:
            self.buffer.append(SPACE)
        self.buffer.append(PendingRun(text, styles=self.context.current_text_styles()))
        if not preserved and content[-1] in _WHITESPACE:
            self.buffer.append(SPACE)

        self.context.last_was_text = True

    def on_tag_close(self) -> None:
        """Close the element of the matching open event; closes of skipped tags are no-ops."""
        if not self._opened:
            logger.debug("Close event without an open element")
            return
        if not self._opened.pop():
            return

        frame = self.context.top
        self._render_if_needed(frame)
        self._apply_tag_close_styles(frame)
        self.context.last_was_text = False
        self.context.pop()

    def flush(self) -> None:
        """Write the buffered runs as one block; no-op when nothing is buffered."""
        if not self.buffer:
            return

        runs = list(self.buffer)
        while runs and runs[-1] is SPACE:
            runs.pop()
        self._apply_callbacks(runs)
        self._output_content(runs, self.context.current_block_styles())
        self.buffer.clear()
        self.context.last_margin = 0.0

    render = flush

    # ------------------------------------------------------------------
    # Flow helpers
    # ------------------------------------------------------------------
    def _render_if_needed(self, frame: ElementFrame) -> bool:
        if not (frame.is_block and self.buffer and self.buffer[-1] is not NEW_LINE):
            return False
        self.flush()
        return True

    def _add_space_if_needed(self) -> None:
        if self.buffer and not self.context.last_was_text and not self.buffer[-1].marker:
            self.buffer.append(SPACE)

    def _break_line(self) -> None:
        if self.buffer:
            self.buffer.append(NEW_LINE)
        else:
            self.writer.advance_cursor(BR_SPACING)

    def _prepare_text(self, content: str, preserved: bool) -> str:
        text = html.unescape(content)
        if not preserved:
            text = normalize_whitespace(text)
        return html.unescape(self.context.take_before_content()) + text

    def _apply_tag_open_styles(self, frame: ElementFrame) -> None:
        tag_styles = frame.effective_style.subset(StyleCategory.TAG_OPEN)
        move_down = tag_styles.get('margin_top', 0.0) - self.context.last_margin + tag_styles.get('padding_top', 0.0)
        if move_down > 0:
            self.writer.advance_cursor(move_down)
        if _requests_break(tag_styles.get('break_before')):
            self.writer.start_new_page()

    def _apply_tag_close_styles(self, frame: ElementFrame) -> None:
        tag_styles = frame.effective_style.subset(StyleCategory.TAG_CLOSE)
        self.context.last_margin = tag_styles.get('margin_bottom', 0.0)
        self.writer.advance_cursor(self.context.last_margin + tag_styles.get('padding_bottom', 0.0))
        if _requests_break(tag_styles.get('break_after')):
            self.writer.start_new_page()

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def _apply_callbacks(self, runs: List[PendingRun]) -> None:
        for run in runs:
            name = run.styles.get('callback')
            if not name:
                continue
            callback_class = self.callbacks.get(name)
            if callback_class is None:
                logger.debug(f"No callback registered as {name!r}")
                continue
            run.callback = callback_class(self.writer, run)

    def _output_content(self, runs: List[PendingRun], block_styles: Dict[str, Any]) -> None:
        left_indent = block_styles.get('margin_left', 0.0) + block_styles.get('padding_left', 0.0)
        options = {key: block_styles[key] for key in BLOCK_OPTION_KEYS if key in block_styles}
        if left_indent > 0:
            options['indent_paragraphs'] = left_indent

        logger.debug(f"Writing {len(runs)} run(s) with options {options}")
        self.writer.put(runs, options, self._bounding_box(block_styles))

    def _bounding_box(self, block_styles: Dict[str, Any]) -> Optional[BoundingBox]:
        if block_styles.get('position') != 'absolute':
            return None

        left = block_styles.get('left') or 0.0
        top = block_styles.get('top') or 0.0
        bounds = self.writer.bounds
        return ((left, bounds.height - top), {'width': bounds.width - left})


def _requests_break(value: Optional[str]) -> bool:
    return bool(value) and value not in NO_BREAK_VALUES

"""
HTML Parser - drives the flow renderer from HTML markup.

Turns markup into ordered open/text/close events:
- void elements are opened and closed immediately
- content of head, script, style, title and template is skipped
- character references are passed on undecoded
- unmatched closing tags are ignored, unclosed elements are closed at the end
"""

from __future__ import annotations

import logging
from html.parser import HTMLParser
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
})

SKIPPED_ELEMENTS = frozenset({'head', 'script', 'style', 'title', 'template'})


class HtmlEventParser(HTMLParser):
    """HTML parser that forwards events to a :class:`DocumentRenderer`."""

    def __init__(self, renderer: Any, tag_styles: Optional[Mapping[str, str]] = None):
        super().__init__(convert_charrefs=False)
        self.renderer = renderer
        self.tag_styles: Dict[str, str] = {name.lower(): value for name, value in (tag_styles or {}).items()}
        self._open: List[str] = []
        self._skip_depth = 0
        self._text: List[str] = []

    def handle_starttag(self, tag: str, attrs: list) -> None:
        tag = tag.lower()
        if self._skip_depth:
            if tag in SKIPPED_ELEMENTS:
                self._skip_depth += 1
            return
        if tag in SKIPPED_ELEMENTS:
            self._flush_text()
            self._skip_depth = 1
            return

        self._flush_text()
        attributes = {name.lower(): value if value is not None else '' for name, value in attrs}
        self.renderer.on_tag_open(tag, attributes, self.tag_styles.get(tag, ''))

        if tag in VOID_ELEMENTS:
            self.renderer.on_tag_close()
            return
        self._open.append(tag)

    def handle_endtag(self, tag: str) -> None:
        tag = tag.lower()
        if self._skip_depth:
            if tag in SKIPPED_ELEMENTS:
                self._skip_depth -= 1
            return
        if tag not in self._open:
            logger.debug(f"Ignoring unmatched </{tag}>")
            return

        self._flush_text()
        while self._open:
            open_tag = self._open.pop()
            self.renderer.on_tag_close()
            if open_tag == tag:
                break

    def handle_data(self, data: str) -> None:
        if not self._skip_depth:
            self._text.append(data)

    def handle_entityref(self, name: str) -> None:
        if not self._skip_depth:
            self._text.append(f"&{name};")

    def handle_charref(self, name: str) -> None:
        if not self._skip_depth:
            self._text.append(f"&#{name};")

    def close(self) -> None:
        """Finish parsing, close dangling elements and flush the renderer."""
        super().close()
        self._flush_text()
        while self._open:
            self._open.pop()
            self.renderer.on_tag_close()
        self.renderer.flush()

    def _flush_text(self) -> None:
        if not self._text:
            return
        content = ''.join(self._text)
        self._text.clear()
        self.renderer.on_text_node(content)


def parse_html(markup: str, renderer: Any, tag_styles: Optional[Mapping[str, str]] = None) -> None:
    """Feed ``markup`` through ``renderer`` and flush it at the end."""
    parser = HtmlEventParser(renderer, tag_styles=tag_styles)
    parser.feed(markup)
    parser.close()

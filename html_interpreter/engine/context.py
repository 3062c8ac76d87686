"""Element frames and the context stack used by the flow renderer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from ..styles.style_record import StyleCategory, StyleRecord
from ..styles.style_resolver import cascade, resolve

if TYPE_CHECKING:
    from ..tags.element_kinds import ElementKind

logger = logging.getLogger(__name__)

PRESERVED_WHITE_SPACE = ('pre', 'pre_wrap')


def extract_data(attributes: Mapping[str, str]) -> Dict[str, str]:
    """Return ``data-*`` attributes with the prefix removed and values stripped."""
    data: Dict[str, str] = {}
    for key, value in attributes.items():
        if key.startswith('data-') and len(key) > len('data-'):
            data[key[len('data-'):]] = (value or '').strip()
    return data


@dataclass
class ElementFrame:
    """State of one open element while it is on the context stack."""

    tag: str
    kind: "ElementKind"
    attributes: Dict[str, str] = field(default_factory=dict)
    data: Dict[str, str] = field(default_factory=dict)
    own_style: StyleRecord = field(default_factory=StyleRecord)
    effective_style: StyleRecord = field(default_factory=StyleRecord)
    before_content: str = ''
    counter: Optional[int] = None

    @classmethod
    def build(cls, tag: str, kind: "ElementKind", attributes: Optional[Mapping[str, str]] = None,
              element_styles: Optional[str] = '') -> "ElementFrame":
        """
        Create a frame and resolve the element's own style.

        Later sources win: kind defaults, attribute-derived styles, document
        styles, then the inline ``style`` attribute.
        """
        attributes = dict(attributes or {})
        own_style = resolve(kind.default_styles)
        if kind.extra_styles is not None:
            own_style = resolve(kind.extra_styles(attributes), own_style)
        own_style = resolve(element_styles, own_style)
        own_style = resolve(attributes.get('style'), own_style)
        return cls(
            tag=tag,
            kind=kind,
            attributes=attributes,
            data=extract_data(attributes),
            own_style=own_style,
        )

    @property
    def is_block(self) -> bool:
        return self.kind.is_block


class ContextStack:
    """LIFO stack of open element frames plus the flow state shared between them."""

    def __init__(self) -> None:
        self._frames: List[ElementFrame] = []
        self.last_margin: float = 0.0
        self.last_was_text: bool = False

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self):
        return iter(self._frames)

    @property
    def top(self) -> Optional[ElementFrame]:
        return self._frames[-1] if self._frames else None

    def push(self, frame: ElementFrame) -> ElementFrame:
        parent = self.top
        frame.effective_style = cascade(parent.effective_style if parent else None, frame.own_style)
        if frame.kind.before_content is not None:
            frame.before_content = frame.kind.before_content(frame, parent)
        self._frames.append(frame)
        return frame

    def pop(self) -> Optional[ElementFrame]:
        if not self._frames:
            logger.debug("Context stack already empty")
            return None
        return self._frames.pop()

    def current_text_styles(self) -> Dict[str, Any]:
        frame = self.top
        if frame is None:
            return {}
        return frame.effective_style.subset(StyleCategory.TEXT_NODE)

    def current_block_styles(self) -> Dict[str, Any]:
        """Block styles of the nearest block-establishing frame, searching from the top."""
        for frame in reversed(self._frames):
            if frame.is_block:
                return frame.effective_style.subset(StyleCategory.BLOCK)
        return {}

    def take_before_content(self) -> str:
        """
        Return and consume the nearest pending content (a list marker).

        Nested blocks do not hide it: the marker of an ``li`` prefixes the first
        text inside the item, also when that text sits in a nested paragraph.
        """
        for frame in reversed(self._frames):
            if frame.before_content:
                content, frame.before_content = frame.before_content, ''
                return content
        return ''

    @property
    def white_space_preserved(self) -> bool:
        frame = self.top
        return frame is not None and frame.effective_style.white_space in PRESERVED_WHITE_SPACE

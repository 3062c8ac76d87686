"""Interface for document writers driven by the flow renderer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence, Tuple

from ..engine.geometry import Size

BoundingBox = Tuple[Tuple[float, float], Dict[str, float]]


class IDocumentWriter(ABC):
    """Operations the flow renderer and the element render hooks rely on."""

    @property
    @abstractmethod
    def bounds(self) -> Size:
        """Writable area of the current page."""

    @abstractmethod
    def advance_cursor(self, amount: float) -> None:
        """Move the cursor down by ``amount`` points."""

    @abstractmethod
    def start_new_page(self) -> None:
        """Continue on a fresh page."""

    @abstractmethod
    def put(self, runs: Sequence[Any], options: Dict[str, Any],
            bounding_box: Optional[BoundingBox] = None) -> None:
        """Write one block of runs at the cursor, or inside ``bounding_box``."""

    @abstractmethod
    def horizontal_rule(self, color: Optional[str] = None, dash: Any = None) -> None:
        """Draw a rule across the writable width at the cursor."""

    @abstractmethod
    def image(self, src: str, options: Dict[str, Any]) -> None:
        """Place an image at the cursor."""

"""Geometry primitives shared by the flow renderer and the writers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Size:
    width: float
    height: float


@dataclass(slots=True)
class Margins:
    top: float
    right: float
    bottom: float
    left: float

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

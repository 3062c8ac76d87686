"""
Text run callbacks.

A callback is attached to a buffered run carrying a ``callback`` style when the
buffer is flushed. Writers call :meth:`decorate` with the run's inline markup
and use the returned markup in its place.
"""

from __future__ import annotations

from typing import Any, Dict, Type


class RunCallback:
    """Base class for run callbacks."""

    def __init__(self, writer: Any, run: Any) -> None:
        self.writer = writer
        self.run = run

    def decorate(self, markup: str) -> str:
        return markup


class Highlight(RunCallback):
    """Paint the run background, yellow unless the run sets a background."""

    DEFAULT_COLOR = 'ffff00'

    def __init__(self, writer: Any, run: Any) -> None:
        super().__init__(writer, run)
        self.color = run.styles.get('background') or self.DEFAULT_COLOR

    def decorate(self, markup: str) -> str:
        return f'<font backColor="#{self.color}">{markup}</font>'


class StrikeThrough(RunCallback):
    def decorate(self, markup: str) -> str:
        return f"<strike>{markup}</strike>"


DEFAULT_CALLBACKS: Dict[str, Type[RunCallback]] = {
    'Highlight': Highlight,
    'StrikeThrough': StrikeThrough,
}

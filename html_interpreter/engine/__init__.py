"""
Engine module: context stack, flow renderer and run callbacks.
"""

from .callbacks import DEFAULT_CALLBACKS, Highlight, RunCallback, StrikeThrough
from .context import ContextStack, ElementFrame, extract_data
from .document_renderer import NEW_LINE, SPACE, DocumentRenderer, PendingRun, normalize_whitespace
from .geometry import Margins, Size

__all__ = [
    "DEFAULT_CALLBACKS",
    "Highlight",
    "RunCallback",
    "StrikeThrough",
    "ContextStack",
    "ElementFrame",
    "extract_data",
    "NEW_LINE",
    "SPACE",
    "DocumentRenderer",
    "PendingRun",
    "normalize_whitespace",
    "Margins",
    "Size",
]

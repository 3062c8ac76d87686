"""
Tags module: the catalogue of supported elements and their render hooks.
"""

from .element_kinds import TAG_KINDS, ElementKind, kind_for

__all__ = [
    "TAG_KINDS",
    "ElementKind",
    "kind_for",
]

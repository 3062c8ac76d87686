"""
Renderers module: document writers driven by the flow renderer.
"""

from .base_writer import IDocumentWriter
from .pdf_writer import PdfWriter, run_markup, runs_to_markup

__all__ = [
    "IDocumentWriter",
    "PdfWriter",
    "run_markup",
    "runs_to_markup",
]

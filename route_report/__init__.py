"""
Route risk and accident report.

Normalizes partial input, turns it into five uniform tables and lays them
out one below the other in a single PDF.
"""

from .config import PLACEHOLDER
from .context import LayoutCursor, NormalizedInput, Section
from .normalize import normalize_input
from .renderer import DocumentRenderer, PDFRenderer, TableSpec
from .report import generate_report
from .sections import SECTION_REGISTRY, build_sections

__all__ = [
    "PLACEHOLDER",
    "DocumentRenderer",
    "LayoutCursor",
    "NormalizedInput",
    "PDFRenderer",
    "SECTION_REGISTRY",
    "Section",
    "TableSpec",
    "build_sections",
    "generate_report",
    "normalize_input",
]

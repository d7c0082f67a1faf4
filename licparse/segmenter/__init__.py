"""Segmenter package for license texts."""

from .license_entry import LicenseEntry
from .paragraph import CENTERED_INDENT, Paragraph, indent_level
from .segment_text import iter_paragraphs, segment_text

__all__ = [
    "CENTERED_INDENT",
    "LicenseEntry",
    "Paragraph",
    "indent_level",
    "iter_paragraphs",
    "segment_text",
]

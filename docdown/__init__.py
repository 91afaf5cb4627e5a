"""docdown - render extracted package documentation as Markdown."""

from .assembler import emit, emit_signature, render
from .models import Category, Document, DocumentKind, Entry, TypeEntry
from .style import DEFAULT_STYLE, HeadingPattern, Style

__version__ = "0.1.0"

__all__ = [
    "Category",
    "DEFAULT_STYLE",
    "Document",
    "DocumentKind",
    "Entry",
    "HeadingPattern",
    "Style",
    "TypeEntry",
    "emit",
    "emit_signature",
    "render",
]

"""Assembles a Markdown document from a :class:`~docdown.models.Document`.

Rendering runs in a fixed order: header, synopsis, usage (libraries only),
then the optional signature. Every function takes the style explicitly and
returns a string; nothing here keeps state between calls, so ``emit`` and
``emit_signature`` can be handed to a template engine as plain callables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .formatting.code import format_code, strip_elided_fields
from .formatting.headings import headify
from .formatting.reflow import reflow
from .models import Category, Document, DocumentKind, Entry, TypeEntry
from .style import DEFAULT_STYLE, Style

_KEYWORDS: Dict[Category, str] = {
    Category.CONSTANT: "const",
    Category.VARIABLE: "var",
    Category.FUNCTION: "func",
    Category.METHOD: "func",
    Category.TYPE: "type",
}

USAGE_ORDER: Tuple[Category, ...] = (
    Category.CONSTANT,
    Category.VARIABLE,
    Category.FUNCTION,
    Category.TYPE,
)


@dataclass(frozen=True)
class Section:
    """A run of entries rendered under one category header."""

    category: Category
    header: str
    entries: Tuple[Entry, ...]


def usage_sections(document: Document, style: Style = DEFAULT_STYLE) -> List[Section]:
    """Return the non-empty usage sections in constant, variable, function, type order."""
    entries_by_category: Dict[Category, Tuple[Entry, ...]] = {
        Category.CONSTANT: document.constants,
        Category.VARIABLE: document.variables,
        Category.FUNCTION: document.functions,
        Category.TYPE: document.types,
    }
    sections: List[Section] = []
    for category in USAGE_ORDER:
        entries = entries_by_category[category]
        if entries:
            sections.append(Section(category, style.header_for(category), tuple(entries)))
    return sections


def trim_space(text: str) -> str:
    return text.strip()


def render_header(document: Document, style: Style = DEFAULT_STYLE) -> str:
    lines = [f"# {document.name}", "--"]
    if style.include_import and not document.is_command and document.dot_import:
        lines.append(f'    import "{document.dot_import}"')
    return "\n".join(lines)


def render_synopsis(document: Document, style: Style = DEFAULT_STYLE) -> str:
    """Reflow the package doc and promote heading-like lines; empty when there is no doc."""
    text = reflow(document.doc)
    if not text:
        return ""
    return headify(text, style.synopsis_heading, style.synopsis_header).rstrip()


def render_entry(
    entry: Entry,
    category: Category,
    header: str,
    style: Style = DEFAULT_STYLE,
    *,
    language: str = "go",
) -> str:
    """Render one entry as its name line, reflowed doc text and declaration block."""
    parts: List[str] = []
    if entry.name:
        receiver = f"({entry.receiver}) " if entry.receiver else ""
        parts.append(f"{header} {_KEYWORDS[category]} {receiver}{entry.name}")
    doc = reflow(entry.doc).rstrip()
    if doc:
        parts.append(doc)
    decl = strip_elided_fields(entry.decl)
    if decl.strip():
        parts.append(format_code(decl, plain=style.plain, language=language).rstrip("\n"))
    return "\n\n".join(parts)


def _render_entries(
    entries: Iterable[Entry],
    category: Category,
    header: str,
    style: Style,
    language: str,
) -> List[str]:
    blocks: List[str] = []
    for entry in entries:
        rendered = render_entry(entry, category, header, style, language=language)
        if rendered:
            blocks.append(rendered)
        if isinstance(entry, TypeEntry):
            blocks.extend(_render_type_members(entry, style, language))
    return blocks


def _render_type_members(entry: TypeEntry, style: Style, language: str) -> List[str]:
    members = (
        (entry.constants, Category.CONSTANT, style.header_for(Category.CONSTANT)),
        (entry.variables, Category.VARIABLE, style.header_for(Category.VARIABLE)),
        (entry.functions, Category.FUNCTION, style.header_for(Category.FUNCTION, nested=True)),
        (entry.methods, Category.METHOD, style.header_for(Category.METHOD, nested=True)),
    )
    blocks: List[str] = []
    for entries, category, header in members:
        blocks.extend(_render_entries(entries, category, header, style, language))
    return blocks


def render_usage(document: Document, style: Style = DEFAULT_STYLE) -> str:
    blocks: List[str] = [style.usage_header]
    for section in usage_sections(document, style):
        blocks.extend(
            _render_entries(
                section.entries, section.category, section.header, style, document.language
            )
        )
    return "\n\n".join(blocks)


def emit(document: Document, style: Style = DEFAULT_STYLE) -> str:
    """Render the full document body (header, synopsis and usage), trimmed."""
    blocks = [render_header(document, style), render_synopsis(document, style)]
    if document.kind is DocumentKind.LIBRARY:
        blocks.append(render_usage(document, style))
    return trim_space("\n\n".join(block for block in blocks if block))


def emit_signature(style: Style = DEFAULT_STYLE) -> str:
    """Render the attribution block, or an empty string unless the style requests it."""
    if not style.include_signature:
        return ""
    return trim_space(style.signature)


def render(document: Document, style: Style = DEFAULT_STYLE) -> str:
    """Render the document followed by the optional signature, as printed without a template."""
    blocks = [emit(document, style), emit_signature(style)]
    return trim_space("\n\n".join(block for block in blocks if block))


__all__ = [
    "Section",
    "USAGE_ORDER",
    "emit",
    "emit_signature",
    "render",
    "render_entry",
    "render_header",
    "render_synopsis",
    "render_usage",
    "trim_space",
    "usage_sections",
]

"""Builders for documents and on-disk package indexes used across tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from docdown.models import Document, DocumentKind, Entry, TypeEntry


def widget_document(**overrides: Any) -> Document:
    """The single-function ``widget`` package."""
    values: dict[str, Any] = {
        "name": "widget",
        "functions": (
            Entry(name="New", doc="New creates a widget.", decl="func New() *Widget"),
        ),
    }
    values.update(overrides)
    return Document(**values)


def full_document() -> Document:
    """A package with entries in every category, including type members."""
    widget_type = TypeEntry(
        name="Widget",
        doc="Widget is a thing with parts.",
        decl=(
            "type Widget struct {\n"
            "    Name string\n"
            "    // contains filtered or unexported fields\n"
            "}"
        ),
        constants=(Entry(name="DefaultSize", decl="const DefaultSize = 3"),),
        functions=(
            Entry(name="NewWidget", doc="NewWidget returns a sized widget.", decl="func NewWidget(size int) *Widget"),
        ),
        methods=(
            Entry(
                name="Close",
                receiver="*Widget",
                doc="Close releases the widget.",
                decl="func (w *Widget) Close() error",
            ),
        ),
    )
    return Document(
        name="parts",
        kind=DocumentKind.LIBRARY,
        doc="Package parts assembles widgets.\n\nOverview\n\nThe rest of the story.",
        dot_import="example.com/parts",
        constants=(Entry(doc="Limits for part counts.", decl="const (\n    Min = 1\n    Max = 9\n)"),),
        variables=(Entry(name="ErrBroken", doc="ErrBroken reports a broken part.", decl='var ErrBroken = errors.New("broken")'),),
        functions=(Entry(name="Assemble", doc="Assemble joins parts.", decl="func Assemble(parts ...*Widget) *Widget"),),
        types=(widget_type,),
    )


def widget_index() -> dict[str, Any]:
    return {
        "name": "widget",
        "doc": "Package widget builds widgets.",
        "functions": [
            {"name": "New", "doc": "New creates a widget.", "decl": "func New() *Widget"},
        ],
        "types": [
            {
                "name": "Widget",
                "doc": "Widget is a widget.",
                "decl": "type Widget struct{}",
                "methods": [
                    {"name": "Spin", "receiver": "*Widget", "decl": "func (w *Widget) Spin()"},
                ],
            }
        ],
    }


def write_index(directory: Path, payload: Mapping[str, Any], name: str = "docindex.json") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


__all__ = ["full_document", "widget_document", "widget_index", "write_index"]

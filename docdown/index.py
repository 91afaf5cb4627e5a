"""Loading of serialized source-indexer output into a :class:`Document`.

The indexer that walks source files lives outside docdown. It leaves a
``docindex.json`` (or ``docindex.yml``) next to the package describing the
package name, whether it is a command, and its constants, variables,
functions and types in declaration order.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .logging import get_logger
from .models import Document, DocumentKind, Entry, TypeEntry

INDEX_FILENAMES = ("docindex.json", "docindex.yml", "docindex.yaml")
IMPORT_FILENAME = ".import"

logger = get_logger("index")


class PackageIndexError(ValueError):
    """Raised when indexer output cannot be parsed into a document."""


class PackageNotFoundError(FileNotFoundError):
    """Raised when no indexer output exists for the requested path."""


class EntryIndex(BaseModel):
    name: str = ""
    doc: str = ""
    decl: str = ""
    receiver: Optional[str] = None

    def to_entry(self) -> Entry:
        return Entry(name=self.name, doc=self.doc, decl=self.decl, receiver=self.receiver)


class TypeIndex(EntryIndex):
    constants: List[EntryIndex] = Field(default_factory=list)
    variables: List[EntryIndex] = Field(default_factory=list)
    functions: List[EntryIndex] = Field(default_factory=list)
    methods: List[EntryIndex] = Field(default_factory=list)

    def to_entry(self) -> TypeEntry:
        return TypeEntry(
            name=self.name,
            doc=self.doc,
            decl=self.decl,
            receiver=self.receiver,
            constants=tuple(item.to_entry() for item in self.constants),
            variables=tuple(item.to_entry() for item in self.variables),
            functions=tuple(item.to_entry() for item in self.functions),
            methods=tuple(item.to_entry() for item in self.methods),
        )


class PackageIndex(BaseModel):
    """Indexer payload for one package or command."""

    name: str
    command: bool = False
    doc: str = ""
    dot_import: Optional[str] = Field(default=None, alias="import")
    language: str = "go"
    constants: List[EntryIndex] = Field(default_factory=list)
    variables: List[EntryIndex] = Field(default_factory=list)
    functions: List[EntryIndex] = Field(default_factory=list)
    types: List[TypeIndex] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    def to_document(self, *, dot_import: Optional[str] = None) -> Document:
        return Document(
            name=self.name,
            kind=DocumentKind.COMMAND if self.command else DocumentKind.LIBRARY,
            doc=self.doc,
            dot_import=self.dot_import or dot_import,
            language=self.language,
            constants=tuple(item.to_entry() for item in self.constants),
            variables=tuple(item.to_entry() for item in self.variables),
            functions=tuple(item.to_entry() for item in self.functions),
            types=tuple(item.to_entry() for item in self.types),
        )


def parse_index(data: Any, *, dot_import: Optional[str] = None) -> Document:
    """Validate an already-decoded indexer payload and build the document."""
    if not isinstance(data, dict):
        raise PackageIndexError("Package index must contain a mapping at the root")
    try:
        index = PackageIndex.model_validate(data)
    except ValidationError as exc:
        raise PackageIndexError(f"Invalid package index: {exc}") from exc
    return index.to_document(dot_import=dot_import)


def find_index(path: Path) -> Path:
    """Resolve ``path`` (a directory or an index file) to an existing index file."""
    path = path.expanduser()
    if path.is_file():
        return path
    if path.is_dir():
        for name in INDEX_FILENAMES:
            candidate = path / name
            if candidate.is_file():
                return candidate
    raise PackageNotFoundError(f"No package/documentation found in {path} ({path.resolve()})")


def read_dot_import(directory: Path) -> Optional[str]:
    """Return the first line of ``.import`` in ``directory``, if present."""
    import_file = directory / IMPORT_FILENAME
    if not import_file.is_file():
        return None
    lines = import_file.read_text(encoding="utf-8").splitlines()
    value = lines[0].strip() if lines else ""
    return value or None


def load_document(path: Path) -> Document:
    """Load the document for a package directory or an explicit index file."""
    index_path = find_index(path)
    logger.debug("Reading package index %s", index_path)
    text = index_path.read_text(encoding="utf-8")
    try:
        if index_path.suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise PackageIndexError(f'Could not parse "{index_path}": {exc}') from exc

    dot_import = read_dot_import(index_path.parent)
    if dot_import:
        logger.debug("Import path from %s: %s", IMPORT_FILENAME, dot_import)
    document = parse_index(data, dot_import=dot_import)
    logger.debug(
        "Loaded %s %s (%d constants, %d variables, %d functions, %d types)",
        document.kind.value,
        document.name,
        len(document.constants),
        len(document.variables),
        len(document.functions),
        len(document.types),
    )
    return document


__all__ = [
    "EntryIndex",
    "INDEX_FILENAMES",
    "PackageIndex",
    "PackageIndexError",
    "PackageNotFoundError",
    "TypeIndex",
    "find_index",
    "load_document",
    "parse_index",
    "read_dot_import",
]

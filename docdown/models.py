"""Documentation data models consumed by the renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class Category(str, Enum):
    """Kinds of documented declarations."""

    CONSTANT = "constant"
    VARIABLE = "variable"
    FUNCTION = "function"
    TYPE = "type"
    METHOD = "method"


class DocumentKind(str, Enum):
    """Whether the documented package is a library or a runnable command."""

    LIBRARY = "library"
    COMMAND = "command"


@dataclass(frozen=True)
class Entry:
    """One documented declaration: a constant group, variable group, function or method."""

    name: str = ""
    doc: str = ""
    decl: str = ""
    receiver: Optional[str] = None


@dataclass(frozen=True)
class TypeEntry(Entry):
    """A documented type together with the declarations grouped under it."""

    constants: Tuple[Entry, ...] = ()
    variables: Tuple[Entry, ...] = ()
    functions: Tuple[Entry, ...] = ()
    methods: Tuple[Entry, ...] = ()


@dataclass(frozen=True)
class Document:
    """Root documentation value for a single package or command.

    Entries keep the order supplied by the source indexer; nothing here
    sorts or deduplicates them.
    """

    name: str
    kind: DocumentKind = DocumentKind.LIBRARY
    doc: str = ""
    dot_import: Optional[str] = None
    language: str = "go"
    constants: Tuple[Entry, ...] = field(default_factory=tuple)
    variables: Tuple[Entry, ...] = field(default_factory=tuple)
    functions: Tuple[Entry, ...] = field(default_factory=tuple)
    types: Tuple[TypeEntry, ...] = field(default_factory=tuple)

    @property
    def is_command(self) -> bool:
        return self.kind is DocumentKind.COMMAND


__all__ = ["Category", "Document", "DocumentKind", "Entry", "TypeEntry"]

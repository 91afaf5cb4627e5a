"""Code block formatting for declaration source."""

from __future__ import annotations

import re

from .reflow import PRE_INDENT

ELIDED_FIELDS_COMMENT = "// contains filtered or unexported fields"

_ELIDED_FIELDS = re.compile(
    r"^[ \t]*" + re.escape(ELIDED_FIELDS_COMMENT) + r"[ \t]*(?:\n|\Z)", re.MULTILINE
)
# Only lines with at least one character are indented.
_LINE_START = re.compile(r"^(?=[^\n])", re.MULTILINE)


def strip_elided_fields(source: str) -> str:
    """Drop the placeholder comment the indexer leaves in truncated struct declarations."""
    return _ELIDED_FIELDS.sub("", source)


def indent(text: str, prefix: str = PRE_INDENT) -> str:
    return _LINE_START.sub(prefix, text)


def format_code(source: str, *, plain: bool = False, language: str = "go") -> str:
    """Render declaration source as a fenced block, or a four-space indented one when ``plain``."""
    body = strip_elided_fields(source).rstrip("\n")
    if plain:
        return indent(body + "\n")
    return f"```{language}\n{body}\n```"


__all__ = ["ELIDED_FIELDS_COMMENT", "format_code", "indent", "strip_elided_fields"]

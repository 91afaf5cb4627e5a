"""Rendering style shared by every docdown renderer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from .models import Category


class HeadingPattern(str, Enum):
    """Lexical rule used to promote synopsis lines into headings."""

    NONE = ""
    ONE_WORD = "1Word"
    TITLE_CASE = "TitleCase"
    TITLE = "Title"
    TITLE_CASE_1WORD = "TitleCase1Word"

    @classmethod
    def parse(cls, value: str | None) -> "HeadingPattern":
        """Resolve a CLI/config name such as ``TitleCase1Word`` into a pattern."""
        if value is None:
            return cls.NONE
        key = value.strip()
        if key.lower() in _NONE_ALIASES:
            return cls.NONE
        for pattern in cls:
            if pattern.value and pattern.value.lower() == key.lower():
                return pattern
        if key.lower() == "oneword":
            return cls.ONE_WORD
        choices = ", ".join(p.value for p in cls if p.value)
        raise ValueError(f"Unknown heading pattern {value!r} (expected one of: {choices}, or \"\")")


_NONE_ALIASES = {"", "-", "none"}


@dataclass(frozen=True)
class Style:
    """Bundle of rendering choices; pass a new value instead of mutating one."""

    include_import: bool = True

    synopsis_header: str = "###"
    synopsis_heading: HeadingPattern = HeadingPattern.TITLE_CASE_1WORD

    usage_header: str = "## Usage"

    constant_header: str = "####"
    variable_header: str = "####"
    function_header: str = "####"
    type_header: str = "####"
    type_function_header: str = "####"

    plain: bool = False

    include_signature: bool = False
    signature: str = "--\n**docdown** generated this document from package doc comments."

    def header_for(self, category: Category, *, nested: bool = False) -> str:
        """Return the header prefix for a category, using the type level when nested."""
        if category is Category.CONSTANT:
            return self.constant_header
        if category is Category.VARIABLE:
            return self.variable_header
        if category is Category.TYPE:
            return self.type_header
        if nested or category is Category.METHOD:
            return self.type_function_header
        return self.function_header

    def with_overrides(self, **changes: Any) -> "Style":
        """Return a copy with the non-None values in ``changes`` applied."""
        applied = {key: value for key, value in changes.items() if value is not None}
        if not applied:
            return self
        return replace(self, **applied)


DEFAULT_STYLE = Style()


__all__ = ["DEFAULT_STYLE", "HeadingPattern", "Style"]

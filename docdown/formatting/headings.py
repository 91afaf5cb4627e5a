"""Synopsis heading detection.

Doc comments are plain prose, so headings are recovered from conventional
capitalization: a line that stands alone and matches the selected
:class:`~docdown.style.HeadingPattern` is rewritten as a Markdown heading.
Patterns are anchored to whole lines, so a wrapped sentence spanning several
lines is never promoted.
"""

from __future__ import annotations

import re
from typing import Dict, Optional

from ..style import HeadingPattern

_ONE_WORD = re.compile(r"^([A-Za-z0-9]+)$", re.MULTILINE)
_TITLE_CASE = re.compile(
    r"^((?:[A-Z][A-Za-z0-9]*)(?:[ \t]+[A-Z][A-Za-z0-9]*)*)$", re.MULTILINE
)
_TITLE = re.compile(r"^((?:[A-Za-z0-9]+)(?:[ \t]+[A-Za-z0-9]+)*)$", re.MULTILINE)
_TITLE_CASE_1WORD = re.compile(
    r"^((?:[A-Za-z0-9]+)|(?:(?:[A-Z][A-Za-z0-9]*)(?:[ \t]+[A-Z][A-Za-z0-9]*)*))$",
    re.MULTILINE,
)

_PATTERNS: Dict[HeadingPattern, Optional[re.Pattern[str]]] = {
    HeadingPattern.NONE: None,
    HeadingPattern.ONE_WORD: _ONE_WORD,
    HeadingPattern.TITLE_CASE: _TITLE_CASE,
    HeadingPattern.TITLE: _TITLE,
    HeadingPattern.TITLE_CASE_1WORD: _TITLE_CASE_1WORD,
}


def heading_regex(pattern: HeadingPattern) -> Optional[re.Pattern[str]]:
    """Return the compiled line matcher for ``pattern`` (``None`` disables detection)."""
    return _PATTERNS[pattern]


def is_heading(line: str, pattern: HeadingPattern) -> bool:
    """Return True when a single line would be promoted under ``pattern``."""
    regex = _PATTERNS[pattern]
    if regex is None or "\n" in line:
        return False
    return regex.fullmatch(line) is not None


def headify(text: str, pattern: HeadingPattern, marker: str = "###") -> str:
    """Prefix every line of ``text`` matching ``pattern`` with ``marker``."""
    regex = _PATTERNS[pattern]
    if regex is None:
        return text
    return regex.sub(lambda match: f"{marker} {match.group(0)}", text)


__all__ = ["heading_regex", "headify", "is_heading"]

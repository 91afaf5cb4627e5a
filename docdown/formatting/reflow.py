"""Paragraph-preserving text reflow for doc comments."""

from __future__ import annotations

import textwrap
from typing import List, Tuple

PAGE_WIDTH = 80
PRE_INDENT = "    "
TAB_WIDTH = 4

_PROSE = "prose"
_PRE = "pre"


def page_width(indent: str) -> int:
    """Wrap width for text under ``indent``; deeper indentation wraps narrower."""
    return max(PAGE_WIDTH - 2 * len(indent), 1)


def reflow(
    text: str,
    indent: str = "",
    continuation: str = "",
    width: int | None = None,
) -> str:
    """Wrap ``text`` to ``width`` columns, keeping paragraph breaks.

    The very first output line is prefixed with ``indent`` and every other
    non-blank line with ``continuation``. Indented runs inside the text are
    treated as preformatted (example code in doc comments), dedented as one
    run even across blank lines, and kept verbatim with tabs expanded
    under an extra four-space indent. Words longer than the width are never
    split.
    """
    if width is None:
        width = page_width(continuation)

    lines: List[str] = []
    for kind, block in _split_blocks(textwrap.dedent(text)):
        if lines:
            lines.append("")
        prefix = continuation if lines else indent
        if kind == _PRE:
            for raw in textwrap.dedent("\n".join(block).expandtabs(TAB_WIDTH)).split("\n"):
                lines.append(f"{prefix}{PRE_INDENT}{raw.rstrip()}" if raw.strip() else "")
                prefix = continuation
            continue
        wrapper = textwrap.TextWrapper(
            width=width,
            initial_indent=prefix,
            subsequent_indent=continuation,
            break_long_words=False,
            break_on_hyphens=False,
        )
        lines.extend(wrapper.wrap(" ".join(" ".join(block).split())))

    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def _split_blocks(text: str) -> List[Tuple[str, List[str]]]:
    blocks: List[Tuple[str, List[str]]] = []
    kind: str | None = None
    current: List[str] = []
    for line in text.splitlines():
        if not line.strip():
            if kind == _PRE:
                # An indented run continues across blank lines.
                current.append("")
                continue
            if current:
                blocks.append((kind or _PROSE, current))
            kind, current = None, []
            continue
        line_kind = _PRE if line[0] in " \t" else _PROSE
        if current and line_kind != kind:
            blocks.append((kind or _PROSE, _drop_trailing_blanks(current)))
            current = []
        kind = line_kind
        current.append(line)
    if current:
        blocks.append((kind or _PROSE, _drop_trailing_blanks(current)))
    return blocks


def _drop_trailing_blanks(block: List[str]) -> List[str]:
    while block and not block[-1]:
        block.pop()
    return block


__all__ = ["PAGE_WIDTH", "PRE_INDENT", "page_width", "reflow"]

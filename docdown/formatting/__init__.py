"""Text, heading and code formatting primitives."""

from .code import ELIDED_FIELDS_COMMENT, format_code, strip_elided_fields
from .headings import headify, heading_regex, is_heading
from .reflow import PAGE_WIDTH, page_width, reflow

__all__ = [
    "ELIDED_FIELDS_COMMENT",
    "PAGE_WIDTH",
    "format_code",
    "headify",
    "heading_regex",
    "is_heading",
    "page_width",
    "reflow",
    "strip_elided_fields",
]

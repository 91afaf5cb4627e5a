"""jinja2 hook for user-supplied document templates."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Callable, Dict

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound
from jinja2 import TemplateError as JinjaTemplateError

from .assembler import emit, emit_signature, trim_space
from .logging import get_logger
from .models import Document
from .style import DEFAULT_STYLE, Style

TEMPLATE_NAME = ".docdown.md"

logger = get_logger("templating")


class TemplateError(RuntimeError):
    """Raised when a document template cannot be parsed or rendered."""


def template_functions(document: Document, style: Style = DEFAULT_STYLE) -> Dict[str, Callable[[], str]]:
    """Return the callables exposed to templates, bound to one document and style."""
    return {
        "emit": partial(emit, document, style),
        "emit_signature": partial(emit_signature, style),
    }


def create_env(directory: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(directory)),
        autoescape=False,
        keep_trailing_newline=True,
    )


def load_template(directory: Path, name: str = TEMPLATE_NAME) -> Template | None:
    """Load ``name`` from ``directory``; returns None when no template exists."""
    env = create_env(directory)
    try:
        template = env.get_template(name)
    except TemplateNotFound:
        logger.debug("No template %s in %s", name, directory)
        return None
    except JinjaTemplateError as exc:
        raise TemplateError(f'Error parsing template "{directory / name}": {exc}') from exc
    logger.debug("Using template %s", directory / name)
    return template


def render_template(template: Template, document: Document, style: Style = DEFAULT_STYLE) -> str:
    """Execute ``template`` with the ``emit`` callbacks and return trimmed Markdown."""
    try:
        output = template.render(document=document, **template_functions(document, style))
    except JinjaTemplateError as exc:
        raise TemplateError(f"Error running template: {exc}") from exc
    return trim_space(output)


__all__ = [
    "TEMPLATE_NAME",
    "TemplateError",
    "create_env",
    "load_template",
    "render_template",
    "template_functions",
]

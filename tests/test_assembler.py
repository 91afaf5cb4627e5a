"""Tests for section rendering and document assembly."""

from __future__ import annotations

from dataclasses import replace

from docdown.assembler import (
    emit,
    emit_signature,
    render,
    render_entry,
    render_header,
    render_synopsis,
    trim_space,
    usage_sections,
)
from docdown.formatting.code import ELIDED_FIELDS_COMMENT
from docdown.models import Category, Document, DocumentKind, Entry
from docdown.style import DEFAULT_STYLE, HeadingPattern, Style

_WIDGET_FLAVORED = (
    "# widget\n"
    "--\n"
    "\n"
    "## Usage\n"
    "\n"
    "#### func New\n"
    "\n"
    "New creates a widget.\n"
    "\n"
    "```go\n"
    "func New() *Widget\n"
    "```"
)


def test_widget_renders_exactly_in_flavored_mode(widget: Document) -> None:
    assert render(widget) == _WIDGET_FLAVORED


def test_widget_renders_exactly_in_plain_mode(widget: Document) -> None:
    expected = _WIDGET_FLAVORED.replace("```go\nfunc New() *Widget\n```", "    func New() *Widget")
    assert render(widget, Style(plain=True)) == expected


def test_widget_without_package_doc_has_no_synopsis(widget: Document) -> None:
    assert render_synopsis(widget) == ""
    assert not any(line.startswith("### ") for line in emit(widget).splitlines())
    assert emit(widget) == _WIDGET_FLAVORED


def test_usage_sections_follow_fixed_category_order(parts: Document) -> None:
    shuffled = Document(
        name=parts.name,
        types=parts.types,
        functions=parts.functions,
        variables=parts.variables,
        constants=parts.constants,
    )
    categories = [section.category for section in usage_sections(shuffled)]
    assert categories == [Category.CONSTANT, Category.VARIABLE, Category.FUNCTION, Category.TYPE]

    output = emit(parts)
    positions = [
        output.index("Limits for part counts."),
        output.index("#### var ErrBroken"),
        output.index("#### func Assemble"),
        output.index("#### type Widget"),
    ]
    assert positions == sorted(positions)


def test_usage_sections_skip_empty_categories(widget: Document) -> None:
    sections = usage_sections(widget)
    assert [section.category for section in sections] == [Category.FUNCTION]
    assert sections[0].header == "####"


def test_entries_keep_indexer_order() -> None:
    document = Document(
        name="order",
        functions=(Entry(name="Zeta", decl="func Zeta()"), Entry(name="Alpha", decl="func Alpha()")),
    )
    output = emit(document)
    assert output.index("func Zeta") < output.index("func Alpha")


def test_type_members_render_after_type(parts: Document) -> None:
    output = emit(parts)
    type_at = output.index("#### type Widget")
    assert type_at < output.index("#### const DefaultSize")
    assert output.index("#### const DefaultSize") < output.index("#### func NewWidget")
    assert output.index("#### func NewWidget") < output.index("#### func (*Widget) Close")
    assert ELIDED_FIELDS_COMMENT not in output


def test_type_function_header_is_used_for_nested_functions(parts: Document) -> None:
    style = Style(function_header="###", type_function_header="#####")
    output = emit(parts, style)
    assert "### func Assemble" in output
    assert "##### func NewWidget" in output
    assert "##### func (*Widget) Close" in output


def test_header_includes_import_line_for_libraries(parts: Document) -> None:
    assert render_header(parts) == '# parts\n--\n    import "example.com/parts"'
    assert render_header(parts, Style(include_import=False)) == "# parts\n--"


def test_synopsis_promotes_headings(parts: Document) -> None:
    synopsis = render_synopsis(parts)
    assert synopsis == "Package parts assembles widgets.\n\n### Overview\n\nThe rest of the story."
    plain = render_synopsis(parts, Style(synopsis_heading=HeadingPattern.NONE))
    assert "### Overview" not in plain


def test_command_documents_omit_usage_and_import(parts: Document) -> None:
    command = replace(parts, kind=DocumentKind.COMMAND)
    output = emit(command)
    assert "## Usage" not in output
    assert "import" not in output
    assert output.startswith("# parts\n--")
    assert "### Overview" in output


def test_entry_without_declaration_or_doc() -> None:
    entry = Entry(name="Bare")
    assert render_entry(entry, Category.FUNCTION, "####") == "#### func Bare"
    assert render_entry(Entry(), Category.CONSTANT, "####") == ""


def test_signature_is_opt_in(widget: Document) -> None:
    assert emit_signature() == ""
    assert render(widget) == emit(widget)

    style = Style(include_signature=True)
    signature = emit_signature(style)
    assert signature == DEFAULT_STYLE.signature
    assert render(widget, style) == f"{emit(widget, style)}\n\n{signature}"


def test_output_is_trimmed_and_trimming_is_idempotent(parts: Document) -> None:
    output = render(parts, Style(include_signature=True))
    assert output == output.strip()
    assert trim_space(output) == output


def test_usage_header_comes_from_style(widget: Document) -> None:
    output = emit(widget, Style(usage_header="## API"))
    assert "## API" in output
    assert "## Usage" not in output


def test_section_headers_prefix_rendered_entries(parts: Document) -> None:
    style = Style(variable_header="#####", type_header="##")
    output = emit(parts, style)
    headers = {section.category: section.header for section in usage_sections(parts, style)}
    assert f"{headers[Category.VARIABLE]} var ErrBroken" in output
    assert f"{headers[Category.TYPE]} type Widget" in output
    assert f"{headers[Category.FUNCTION]} func Assemble" in output


def test_declaration_with_only_elided_fields_renders_no_code_block() -> None:
    entry = Entry(name="T", decl=f"{ELIDED_FIELDS_COMMENT}\n")
    assert render_entry(entry, Category.TYPE, "####") == "#### type T"
    assert render_entry(entry, Category.TYPE, "####", Style(plain=True)) == "#### type T"

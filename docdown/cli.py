"""CLI entrypoints for docdown commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .assembler import render
from .config import ConfigError, load_config
from .index import PackageIndexError, PackageNotFoundError, load_document
from .logging import configure_logging, get_logger
from .style import HeadingPattern, Style
from .templating import TEMPLATE_NAME, TemplateError, load_template, render_template

EXIT_USAGE = 64

logger = get_logger("cli")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        metavar="PATH",
        help="Also write log records to PATH.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docdown",
        description="Render extracted package documentation as Markdown.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render",
        help="Print Markdown documentation for a package.",
    )
    _add_verbose_option(render_parser, suppress_default=True)
    _add_log_file_option(render_parser, suppress_default=True)
    render_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Package directory or index file (defaults to current directory).",
    )
    render_parser.add_argument(
        "--plain",
        action="store_true",
        default=None,
        help="Emit standard Markdown with indented code instead of fenced blocks.",
    )
    render_parser.add_argument(
        "--signature",
        action="store_true",
        default=None,
        help="Append the docdown signature to the end of the document.",
    )
    render_parser.add_argument(
        "--no-import",
        dest="include_import",
        action="store_false",
        default=None,
        help="Omit the import line under the document title.",
    )
    render_parser.add_argument(
        "--heading",
        default=None,
        metavar="NAME",
        help='Heading detection method: 1Word, TitleCase, Title, TitleCase1Word, "" (default: TitleCase1Word).',
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP rendering service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_log_file_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def _resolve_style(args: argparse.Namespace, base: Style) -> Style:
    heading = None
    if args.heading is not None:
        heading = HeadingPattern.parse(args.heading)
    return base.with_overrides(
        plain=args.plain,
        include_signature=args.signature,
        include_import=args.include_import,
        synopsis_heading=heading,
    )


def run_render(args: argparse.Namespace) -> str:
    """Load, configure and render the package named by ``args.path``."""
    path = Path(args.path)
    document = load_document(path)
    directory = path if path.is_dir() else path.parent

    config = load_config(directory)
    style = _resolve_style(args, config.style)

    if config.template is not None:
        template = load_template(config.template.parent, config.template.name)
        if template is None:
            logger.warning("Configured template %s not found; rendering without it", config.template)
    else:
        template = load_template(directory, TEMPLATE_NAME)

    if template is None:
        return render(document, style)
    return render_template(template, document, style)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docdown commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "render":
        try:
            documentation = run_render(args)
        except (PackageNotFoundError, PackageIndexError, ConfigError, TemplateError) as exc:
            parser.exit(EXIT_USAGE, f"{exc}\n")
        except ValueError as exc:
            parser.exit(EXIT_USAGE, f"docdown render failed: {exc}\n")
        print(documentation)
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])

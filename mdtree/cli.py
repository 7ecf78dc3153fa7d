"""Command line entry point.

Usage:
    mdtree render document.json      # JSON tree -> markdown
    mdtree normalize notes.md        # markdown -> tree -> canonical markdown
    mdtree sample [--json]           # built-in sample document

Pass ``-`` as the file to read from stdin.
"""

import argparse
import sys
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from mdtree.config import get_settings
from mdtree.document import Root, build_sample_document, markdown_to_document, render
from mdtree.exceptions import MdtreeError
from mdtree.logging_config import configure_logging


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _render(document: Root) -> str:
    return render(document, max_depth=get_settings().max_render_depth)


def run_render(args: argparse.Namespace) -> int:
    document = Root.model_validate_json(_read_input(args.file))
    logger.debug(f"Loaded document with {len(document.children)} top-level blocks")
    sys.stdout.write(_render(document))
    return 0


def run_normalize(args: argparse.Namespace) -> int:
    strict = args.strict or get_settings().strict_parsing
    document = markdown_to_document(_read_input(args.file), strict=strict)
    sys.stdout.write(_render(document))
    return 0


def run_sample(args: argparse.Namespace) -> int:
    document = build_sample_document()
    if args.json:
        sys.stdout.write(document.model_dump_json(indent=2) + "\n")
    else:
        sys.stdout.write(_render(document))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mdtree", description="Render Markdown document trees")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr")
    commands = parser.add_subparsers(dest="command", required=True)

    render_cmd = commands.add_parser("render", help="Render a JSON document tree as markdown")
    render_cmd.add_argument("file", help="JSON file holding a root node, or - for stdin")
    render_cmd.set_defaults(handler=run_render)

    normalize_cmd = commands.add_parser("normalize", help="Parse markdown and print its canonical form")
    normalize_cmd.add_argument("file", help="Markdown file, or - for stdin")
    normalize_cmd.add_argument("--strict", action="store_true", help="Fail on markdown the document model can't hold")
    normalize_cmd.set_defaults(handler=run_normalize)

    sample_cmd = commands.add_parser("sample", help="Print the built-in sample document")
    sample_cmd.add_argument("--json", action="store_true", help="Output the tree as JSON instead of markdown")
    sample_cmd.set_defaults(handler=run_sample)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else get_settings().log_level)

    try:
        return args.handler(args)
    except (MdtreeError, ValidationError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

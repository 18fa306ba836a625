"""
Command-line interface for generating graphql-go source from GraphQL SDL files.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from emitter import DirectorySink
from frontend import run_frontend
from generator import Generator, GeneratorError
from logconfig import configure_logging


def _format_location(line: int | None, column: int | None) -> str:
    if line is None:
        return ""
    if column is None:
        return f":{line}"
    return f":{line}:{column}"


def _print_diagnostics(messages: List[str]) -> None:
    for message in messages:
        sys.stderr.write(message + "\n")


def generate_command(args: argparse.Namespace) -> int:
    configure_logging(verbose=args.verbose)

    input_path = Path(args.input).resolve()
    if not input_path.exists():
        sys.stderr.write(f"ERROR: Input file not found: {input_path}\n")
        return 1

    try:
        source = input_path.read_text(encoding="utf-8")
    except OSError as exc:
        sys.stderr.write(f"ERROR: Failed to read {input_path}: {exc}\n")
        return 1

    frontend_result = run_frontend(source, source_name=str(input_path))
    source_name = frontend_result.parse.source_name

    if frontend_result.document is None:
        sys.stderr.write("ERROR: Parsing failed; no document produced.\n")
        for error in frontend_result.parse.errors:
            loc = _format_location(error.line, error.column)
            sys.stderr.write(f"  {error.description}{loc}\n")
        return 1

    _print_diagnostics(
        [f"WARNING {source_name}: {message}" for message in frontend_result.diagnostics]
    )
    if args.strict and frontend_result.diagnostics:
        return 1

    out_dir = Path(args.out_dir) if args.out_dir else input_path.parent
    try:
        filename = Generator().generate(
            frontend_result.document, args.options, sink=DirectorySink(out_dir)
        )
    except GeneratorError as exc:
        sys.stderr.write(f"ERROR: {exc}\n")
        return 1

    sys.stderr.write(f"INFO {source_name}: wrote {out_dir / filename}\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gql2go", description="Generate graphql-go source from GraphQL SDL"
    )
    subparsers = parser.add_subparsers(dest="command")

    generate_parser = subparsers.add_parser(
        "generate", help="Generate a Go file from a single GraphQL document"
    )
    generate_parser.add_argument("input", help="Path to the .graphql/.gql file")
    generate_parser.add_argument(
        "--out-dir",
        help="Directory for the generated .go file (defaults to the input's directory)",
    )
    generate_parser.add_argument(
        "--options",
        default="",
        help='JSON generator options, e.g. \'{"package": "api", "descriptions": true}\'',
    )
    generate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when the frontend skipped or ignored any definitions.",
    )
    generate_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    generate_parser.set_defaults(func=generate_command)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

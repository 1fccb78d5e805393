"""CLI entry point for docpolish.

Markdown rendering happens upstream; commands here take the rendered HTML.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import DOCS_DIR


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="docpolish",
        description="Clean rendered API documentation HTML for publishing.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"docpolish {__version__}",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Polish rendered HTML and write <version>.html")
    p_build.add_argument("input", help="Rendered HTML file ('-' for stdin)")
    p_build.add_argument("--out", "-o", type=Path, default=DOCS_DIR, help="Output directory")

    p_polish = sub.add_parser("polish", help="Polish rendered HTML and print the page")
    p_polish.add_argument("input", help="Rendered HTML file ('-' for stdin)")

    p_uncomment = sub.add_parser("uncomment", help="Uncomment HTML hints in markdown")
    p_uncomment.add_argument("input", help="Markdown file ('-' for stdin)")

    args = parser.parse_args(argv)

    if args.cmd == "build":
        return _cmd_build(args)
    if args.cmd == "polish":
        return _cmd_polish(args)
    if args.cmd == "uncomment":
        return _cmd_uncomment(args)

    parser.print_help()
    return 2


def _read_input(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def _print_warnings(warnings: list[str]) -> None:
    if warnings:
        print(f"\nWarnings ({len(warnings)}):", file=sys.stderr)
        for w in warnings[:10]:
            print(f"  - {w}", file=sys.stderr)
        if len(warnings) > 10:
            print(f"  ... and {len(warnings) - 10} more", file=sys.stderr)


def _cmd_build(args: Any) -> int:
    from .site.build import build_docs

    try:
        result = build_docs(_read_input(args.input), args.out)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Docs built")
    print(f"  Output: {result.output_path}")
    print(f"  Version: {result.version or 'unknown'}")
    _print_warnings(result.warnings)
    return 0


def _cmd_polish(args: Any) -> int:
    from .site.build import render_docs

    try:
        result = render_docs(_read_input(args.input))
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(result.output)
    _print_warnings(result.warnings)
    return 0


def _cmd_uncomment(args: Any) -> int:
    from .site.source import uncomment_hints

    try:
        markdown = _read_input(args.input)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(uncomment_hints(markdown))
    return 0


if __name__ == "__main__":
    app()

"""``superconf`` command line: parse files and print the resulting mapping.

Also runnable as ``python -m superconf``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO

from .errors import SuperConfError
from .lexer import DEFAULT_SEPARATOR
from .parser import parse_file
from .values import Value, VList, VSingle, to_plain

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a single value for one-line display."""
    if isinstance(value, VSingle):
        return value.value
    if isinstance(value, VList):
        return "[" + ", ".join(value.items) + "]"
    return repr(value)


def _show_document(document: dict[str, Value], dest: IO[str]) -> None:
    if not document:
        print("  (no entries)", file=dest)
        return
    width = max(len(k) for k in document)
    for key, value in document.items():
        print(f"{key:<{width}} = {_fmt_inline(value)}", file=dest)


def _show_json(document: dict[str, Value], dest: IO[str]) -> None:
    print(json.dumps(to_plain(document), indent=2, ensure_ascii=False), file=dest)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="superconf",
        description="Parse SuperConf files and print their key/value mapping.",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="File(s) to parse.")
    parser.add_argument(
        "-s",
        "--separator",
        default=DEFAULT_SEPARATOR,
        help="Single character separating key and value fields (default: space).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject keys without values and lines without keys.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print each document as JSON.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: list[str] | None = None, dest: IO[str] | None = None) -> int:
    """Parse every file given on the command line. Returns the exit status."""
    args = build_parser().parse_args(argv)
    dest = dest if dest is not None else sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    for filepath in args.files:
        try:
            document = parse_file(filepath, args.separator, strict=args.strict)
        except SuperConfError as exc:
            print(f"error: {filepath}: {exc}", file=sys.stderr)
            return 1
        except ValueError as exc:
            # bad --separator
            print(f"error: {exc}", file=sys.stderr)
            return 2

        logger.debug("%s: %d entries", filepath, len(document))
        if len(args.files) > 1 and not args.json:
            print(f"# {filepath}", file=dest)
        if args.json:
            _show_json(document, dest)
        else:
            _show_document(document, dest)

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Re-serialize an HTML file: ``python -m html5serial page.html``.

Parsing is done by html5lib, which must be installed separately
(``pip install html5serial[html5lib]``).
"""

from __future__ import annotations

import argparse
import logging
import sys

from .dom import from_dom
from .entities import escape, escape_ascii
from .serializer import save


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="html5serial", description=__doc__.splitlines()[0])
    parser.add_argument("file", nargs="?", help="HTML file to read (default: stdin)")
    parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    parser.add_argument(
        "--no-format",
        action="store_true",
        help="Do not insert newlines around block-level elements",
    )
    parser.add_argument(
        "--fragment",
        action="store_true",
        help="Parse the input as a body fragment and write it without a doctype",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Encode non-ASCII characters as character references",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        import html5lib
    except ImportError:
        print("ERROR: html5lib is required to parse input. Install with: pip install html5lib", file=sys.stderr)
        return 1

    # Bytes go to html5lib undecoded so a BOM or <meta charset> wins; input
    # with neither is read as UTF-8.
    if args.file:
        with open(args.file, "rb") as fh:
            source = fh.read()
    else:
        source = sys.stdin.buffer.read()

    if args.fragment:
        tree = from_dom(html5lib.parseFragment(source, treebuilder="dom", likely_encoding="utf-8"))
    else:
        tree = from_dom(html5lib.parse(source, treebuilder="dom", likely_encoding="utf-8"))

    save(
        tree,
        args.output or sys.stdout,
        pretty=not args.no_format,
        escape=escape_ascii if args.ascii else escape,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

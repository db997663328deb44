"""Check whether a command-line argument is a single Lisp expression.

Usage:
    lispread '#xFF'
    lispread '"a\\nb"' --json
    lispread 'foo' -v
    lispread -- -5          # expressions starting with '-'
"""

import argparse
import logging
import sys

from .parser import ParseError, parse, report


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Recognize a single Lisp expression")
    parser.add_argument("expr", help="Expression text to parse")
    parser.add_argument("rest", nargs="*", help=argparse.SUPPRESS)  # ignored
    parser.add_argument(
        "--json",
        action="store_true",
        help="Also print the parsed value as JSON",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        expr = parse(args.expr)
    except ParseError as e:
        print(report(e))
        sys.exit(1)

    print(report())
    if args.json:
        print(expr.model_dump_json())


if __name__ == "__main__":
    main()

"""
lasserre/__main__.py

Command-line driver: reads an `.ine` file and prints the exact volume of the
polytope it describes.

    python -m lasserre [FILE] [--decimal] [--chatty]
"""

import argparse
import sys

from lasserre.exceptions import LasserreError
from lasserre.io.ine import format_volume, read_ine
from lasserre.volume import lasserre_volume


DEFAULT_INPUT = "vol.ine"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lasserre",
        description="Exact volume of an H-polytope by Lasserre's method.",
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT,
                        help=f"halfspace description (default: {DEFAULT_INPUT})")
    parser.add_argument("--decimal", action="store_true",
                        help="print a decimal approximation instead of p/q")
    parser.add_argument("--chatty", action="store_true",
                        help="trace every facet contribution")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        convex_polytope = read_ine(args.path)
        volume = lasserre_volume(convex_polytope, chatty=args.chatty)
    except (LasserreError, OSError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    print(format_volume(volume, decimal=args.decimal))
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Run one or all of the standalone examples.

Usage:
    python run_examples.py --list
    python run_examples.py queries
    python run_examples.py all
"""
import argparse
import sys
from typing import List, Optional

from guide_examples.snippets import SNIPPETS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the guide examples.")
    parser.add_argument(
        "names",
        nargs="*",
        metavar="NAME",
        help=f"example to run: {', '.join(SNIPPETS)} or 'all'",
    )
    parser.add_argument("--list", action="store_true", help="list the available examples")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.list or not args.names:
        for name in SNIPPETS:
            print(name)
        return 0
    names = list(SNIPPETS) if "all" in args.names else args.names
    unknown = [name for name in names if name not in SNIPPETS]
    if unknown:
        parser.error(f"unknown example(s): {', '.join(unknown)}")
    for name in names:
        SNIPPETS[name]()
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())

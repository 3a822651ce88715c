"""Command-line entry point: a greeting and the sum of two arguments."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

GREETING = "Hello, World!"
USAGE = "Usage: primer sum num1 num2"

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _leading_integer(text: str) -> int:
    """The integer at the start of ``text``, or zero when there is none."""
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def greeting() -> str:
    """The traditional first words of a program."""
    return GREETING


def command_line_sum(args: Sequence[str]) -> int:
    """Sum of the leading integers of the first two arguments.

    Text that does not start with an integer counts as zero; further
    arguments are ignored. Raises ValueError with fewer than two arguments.
    """
    if len(args) < 2:
        raise ValueError(USAGE)
    first, second = args[0], args[1]
    return _leading_integer(first) + _leading_integer(second)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="primer", description="Small introductory programs.")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("hello", help="print a greeting")
    sum_parser = commands.add_parser("sum", help="add two integers")
    sum_parser.add_argument("numbers", nargs="*", help="two integers to add")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    arguments = _build_parser().parse_args(argv)
    if arguments.command == "sum":
        try:
            total = command_line_sum(arguments.numbers)
        except ValueError as error:
            print(error)
            return 1
        print(f"Sum = {total}")
        return 0
    print(greeting())
    return 0


if __name__ == "__main__":
    sys.exit(main())
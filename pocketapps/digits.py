"""Sum the decimal digits of an integer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def digit_sum(number: int) -> int:
    """Sum of the decimal digits; a negative number gives a negative sum."""
    total = sum(int(d) for d in str(abs(number)))
    return -total if number < 0 else total


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Sum the digits of a number.").parse_args(argv)
    try:
        text = input("What number do you want to check: ").strip()
    except EOFError:
        print("No number given.", file=sys.stderr)
        return 1
    try:
        number = int(text)
    except ValueError:
        print(f"Invalid number: {text!r}", file=sys.stderr)
        return 1
    print(f"The sum of the digits of the number is {digit_sum(number)}")
    return 0
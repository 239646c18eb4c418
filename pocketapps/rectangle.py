"""Draw a filled rectangle or square out of a chosen symbol."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def rectangle(length: int, height: int, symbol: str) -> list[str]:
    """Return ``height`` lines of ``length`` copies of ``symbol``."""
    if len(symbol) != 1:
        raise ValueError(f"symbol must be a single character, got {symbol!r}")
    return [symbol * length] * height


def _read_int(prompt: str) -> int:
    text = input(prompt).strip()
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"not a whole number: {text!r}") from None


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Draw a rectangle of symbols.").parse_args(argv)
    print("This is the rectangle and square maker!!!")
    try:
        length = _read_int("Choose the length of the shape you would like to create:")
        height = _read_int("Choose the height of the shape you would like to create:")
        symbol = input("What symbol would you like to build it with?").strip()[:1]
        lines = rectangle(length, height, symbol)
    except EOFError:
        print("Input ended early.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 1
    print()
    for line in lines:
        print(line)
    return 0
"""Star patterns: a gallery of fixed shapes and triangles sized by row count."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

ROWS_PROMPT = "How many rows do you want for these loop made patterns: "


def _stars(count: int) -> str:
    return " ".join("*" * count)


def _row(indent: int, count: int) -> str:
    return " " * indent + _stars(count)


def _left(sizes: Iterable[int]) -> list[str]:
    return [_stars(k) for k in sizes]


def _right(sizes: Iterable[int], width: int) -> list[str]:
    return [_row(2 * (width - k), k) for k in sizes]


def _pyramid(sizes: Iterable[int], width: int, *, odd: bool) -> list[str]:
    return [_row(2 * (width - k), 2 * k - 1 if odd else 2 * k) for k in sizes]


def _double(sizes: Iterable[int]) -> list[str]:
    return [f"{_row(2 * (5 - k), k)}  {_stars(k)}" for k in sizes]


def fixed_patterns() -> list[list[str]]:
    """Return the gallery of fixed shapes, each as a list of lines."""
    up5, down5 = range(1, 6), range(5, 0, -1)
    up6, down6 = range(1, 7), range(6, 0, -1)
    return [
        _left(up5),
        _left(down5),
        _right(up5, 5),
        _right(down5, 5),
        _left(up5) + _left(down5),
        _left(up6) + _left(down5),
        _right(up5, 5) + _right(down5, 5),
        _right(up6, 6) + _right(down5, 6),
        _pyramid(up5, 5, odd=False),
        _pyramid(up6, 6, odd=True),
        _pyramid(down5, 5, odd=False),
        _pyramid(down6, 6, odd=True),
        _right(up5, 5) + [_row(10, k) for k in down5],
        [_row(10, k) for k in up5] + _right(down5, 5),
        _pyramid(up5, 5, odd=False) + _pyramid(down5, 5, odd=False),
        _pyramid(up6, 6, odd=True) + _pyramid(down6, 6, odd=True),
        _pyramid(up6, 6, odd=False) + _pyramid(down5, 6, odd=False),
        _pyramid(range(1, 8), 7, odd=True) + _pyramid(down6, 7, odd=True),
        _double(up5) + [""] + _double(down5),
    ]


def triangle_patterns(rows: int) -> list[list[str]]:
    """Return the four triangles drawn with the given number of rows."""
    return [
        [" " * i + "*" * (rows - i) for i in range(rows)],
        ["*" * i for i in range(1, rows + 1)],
        ["*" * i for i in range(rows, 0, -1)],
        [" " * (rows - i) + "*" * i for i in range(1, rows + 1)],
    ]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print star patterns.")
    parser.add_argument("rows", nargs="?", type=int, help="rows for the triangles")
    args = parser.parse_args(argv)

    for pattern in fixed_patterns():
        for line in pattern:
            print(line)
        print()
        print()

    rows = args.rows
    if rows is None:
        print(ROWS_PROMPT)
        try:
            text = input()
        except EOFError:
            print("No row count given.", file=sys.stderr)
            return 1
        try:
            rows = int(text.strip())
        except ValueError:
            print(f"Invalid row count: {text.strip()!r}", file=sys.stderr)
            return 1

    for pattern in triangle_patterns(rows):
        for line in pattern:
            print(line)
    print()
    return 0
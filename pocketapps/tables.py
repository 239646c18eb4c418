"""Multiplication tables: one number's table and the square times grid."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def multiplication_table(number: int, till: int) -> list[int]:
    """Products ``number * i`` for ``i`` from 0 to ``till`` inclusive."""
    if till < 0:
        raise ValueError(f"till must not be negative, got {till}")
    return [number * i for i in range(till + 1)]


def table_sum(number: int, till: int) -> int:
    """Sum of all products in the table."""
    return sum(multiplication_table(number, till))


def times_grid(size: int = 10) -> list[str]:
    """Lines of the size-by-size times grid, each cell four characters wide."""
    return ["".join(f"{x * y:4d}" for y in range(1, size + 1)) for x in range(1, size + 1)]


def table_main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Print a multiplication table.").parse_args(argv)
    try:
        print("Which number would you like to have the table?")
        number_text = input().strip()
        till_text = input("Till how much do you want the table to go till: ").strip()
    except EOFError:
        print("Input ended early.", file=sys.stderr)
        return 1
    try:
        number, till = int(number_text), int(till_text)
        table = multiplication_table(number, till)
    except ValueError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 1
    for i, product in enumerate(table):
        print(f"{number} x {i} = {product}")
    print(f"The sum of all the numbers in the following {number} table is: {sum(table)} ")
    for i, product in enumerate(table):
        print(f"{number} X {i} = {product} ")
    return 0


def grid_main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Print the 10x10 times grid.").parse_args(argv)
    for line in times_grid():
        print(line)
    return 0
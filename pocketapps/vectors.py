"""Add or multiply two-dimensional integer vectors component by component."""

from __future__ import annotations

import argparse
import operator
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import reduce


@dataclass(frozen=True)
class Vector:
    x: int
    y: int

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __mul__(self, other: Vector) -> Vector:
        return Vector(self.x * other.x, self.y * other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def _combine(vectors: Iterable[Vector], op, start: Vector) -> Vector:
    vectors = list(vectors)
    if not vectors:
        raise ValueError("Number of vectors must be greater than 0.")
    return reduce(op, vectors, start)


def vector_sum(vectors: Iterable[Vector]) -> Vector:
    """Component-wise sum of one or more vectors."""
    return _combine(vectors, operator.add, Vector(0, 0))


def vector_product(vectors: Iterable[Vector]) -> Vector:
    """Component-wise product of one or more vectors."""
    return _combine(vectors, operator.mul, Vector(1, 1))


def _read_int(prompt: str = "") -> int:
    return int(input(prompt).strip())


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Add or multiply vectors.").parse_args(argv)
    print("What do you want to do with the vectors.?")
    print("Type 1 for addition")
    print("Type 2 for (scalar) multiplication")
    try:
        choice = _read_int()
    except (EOFError, ValueError):
        choice = None
    if choice == 1:
        verb, noun, combine = "add", "sum", vector_sum
    elif choice == 2:
        verb, noun, combine = "multiply", "product", vector_product
    else:
        print("Invalid choice. Please enter 1 or 2.")
        return 1

    try:
        count = _read_int(f"How many vectors would you like to {verb} together: ")
        if count <= 0:
            print("Number of vectors must be greater than 0.")
            return 1
        vectors = [
            Vector(
                _read_int(f"What is the x coordinate of vector {n}: "),
                _read_int(f"What is the y coordinate of vector {n}: "),
            )
            for n in range(1, count + 1)
        ]
    except (EOFError, ValueError):
        print("Invalid input. Please enter whole numbers.")
        return 1

    print(f"The {noun} of the vector gives{combine(vectors)}")
    return 0
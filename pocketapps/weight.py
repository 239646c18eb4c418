"""Convert a weight on Earth to the weight on other bodies of the solar system."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

GRAVITY: dict[str, float] = {
    "Mercury": 0.38,
    "Venus": 0.91,
    "Earth": 1.0,
    "Mars": 0.38,
    "Jupiter": 2.35,
    "Saturn": 1.06,
    "Uranus": 0.89,
    "Neptune": 1.12,
    "Pluto": 0.063,
    "the Moon": 0.165,
    "the Sun": 27.9,
}


def planet_weights(weight: float) -> dict[str, float]:
    """Weight on each body, keyed by name, in a fixed order."""
    return {body: weight * factor for body, factor in GRAVITY.items()}


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Show your weight on other planets.").parse_args(argv)
    print("What is your weight  on earth?")
    try:
        text = input().strip()
    except EOFError:
        print("No weight given.", file=sys.stderr)
        return 1
    try:
        weight = float(text)
    except ValueError:
        print(f"Invalid weight: {text!r}", file=sys.stderr)
        return 1
    for body, value in planet_weights(weight).items():
        print(f"Your weight on {body} is: {value:.2f}")
    return 0
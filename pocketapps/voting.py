"""Decide whether someone may vote, and how much tax they still owe."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

ADULT = 18

_BRACKETS: tuple[tuple[int, int], ...] = (
    (300000, 0),
    (600000, 5),
    (900000, 10),
    (1200000, 15),
    (1500000, 20),
)
_TOP_RATE = 30


def tax_rate(income: int) -> int:
    """Percentage of a positive annual income owed as tax."""
    if income <= 0:
        raise ValueError(f"income must be positive, got {income}")
    return next((rate for limit, rate in _BRACKETS if income <= limit), _TOP_RATE)


def tax_due(income: int) -> float:
    """Amount of tax owed on a positive annual income."""
    return income * tax_rate(income) / 100


def _age_lines(age: int) -> list[str] | None:
    if age < 0:
        raise ValueError("Invalid age entered.")
    if 0 < age < ADULT:
        return ["You are not old enough to vote!!!", "Hence, You are not applicable for Voting!!!"]
    return None


def _tax_status_lines(taxes_paid: bool) -> list[str]:
    lines = ["You are old enough to vote."]
    if taxes_paid:
        lines += ["You have payed your taxes as well.", "Hence, You are applicable for Voting!!!"]
    else:
        lines += ["You have not payed your taxes. ", "Hence, You are not applicable for Voting!!!"]
    return lines


def _income_lines(income: int) -> list[str]:
    if income <= 0:
        return []
    if tax_rate(income) == 0:
        return ["You don't have to pay taxes", "Hence, You are applicable for Voting!!!"]
    return [
        f"You have to pay {tax_due(income):.2f} rupees",
        "Please pay your taxes as early as possible.",
        "Then you will be applicable for voting.",
    ]


def voting_advice(age: int, taxes_paid: bool, income: int | None = None) -> list[str]:
    """Lines of advice; ``income`` is needed when taxes are unpaid."""
    too_young = _age_lines(age)
    if too_young is not None:
        return too_young
    lines = _tax_status_lines(taxes_paid)
    if taxes_paid:
        return lines
    if income is None:
        raise ValueError("income is required when taxes are unpaid")
    return lines + _income_lines(income)


def _read_int(prompt: str = "") -> int:
    return int(input(prompt).strip())


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Check whether you may vote.").parse_args(argv)
    print("What is your age?")
    try:
        age = _read_int()
        too_young = _age_lines(age)
    except (EOFError, ValueError):
        print("Invalid age entered.")
        return 1
    if too_young is not None:
        for line in too_young:
            print(line)
        return 0

    print("Have you paid your taxes?")
    try:
        answer = _read_int("Type 1 for yes and Type 2 for no: ")
    except (EOFError, ValueError):
        answer = None
    if answer not in (1, 2):
        print("Invalid input for taxes. Please enter 1 or 2.")
        return 1
    taxes_paid = answer == 1

    for line in _tax_status_lines(taxes_paid):
        print(line)
    if taxes_paid:
        return 0
    try:
        income = _read_int("How much money do you make annually?")
    except (EOFError, ValueError):
        print("Invalid income entered.")
        return 1
    for line in _income_lines(income):
        print(line)
    return 0
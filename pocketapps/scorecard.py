"""Grade marks in five subjects and decide whether a student passed."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

SUBJECTS: tuple[str, ...] = ("Math", "English", "Physics", "Chemistry", "Physical")
PASS_MARK = 33

_GRADE_FLOORS: tuple[tuple[int, str], ...] = (
    (90, "A+"),
    (80, "A"),
    (70, "B+"),
    (60, "B"),
    (50, "C+"),
    (40, "C"),
    (33, "D"),
    (0, "Fail"),
)


class Standard(IntEnum):
    TENTH = 1
    TWELFTH = 2

    @property
    def label(self) -> str:
        return "10th" if self is Standard.TENTH else "12th"


def grade_for(value: float) -> str:
    """Return the letter grade for a mark or percentage between 0 and 100."""
    if not 0 <= value <= 100:
        raise ValueError(f"value must be between 0 and 100, got {value}")
    return next(grade for floor, grade in _GRADE_FLOORS if value >= floor)


def _check_scores(scores: Sequence[int]) -> tuple[int, ...]:
    scores = tuple(scores)
    if len(scores) != len(SUBJECTS):
        raise ValueError(f"expected {len(SUBJECTS)} scores, got {len(scores)}")
    for name, score in zip(SUBJECTS, scores):
        if not 0 <= score <= 100:
            raise ValueError(
                f"Invalid marks input for {name}. Please enter a number between 0 and 100."
            )
    return scores


def percentage(scores: Sequence[int]) -> float:
    """Average of the five subject marks, as a percentage."""
    return sum(_check_scores(scores)) * 0.2


@dataclass(frozen=True)
class Report:
    """The outcome of grading one student's marks."""

    standard: Standard
    scores: tuple[int, ...]
    subject_grades: tuple[str, ...]
    percentage: float
    grade: str
    failed: int

    @property
    def passed(self) -> bool:
        return self.failed == 0 and self.percentage >= PASS_MARK

    def lines(self) -> list[str]:
        """The report as printed lines."""
        label = self.standard.label
        out = [
            f"Your grade in {name} is : {grade}"
            for name, grade in zip(SUBJECTS, self.subject_grades)
        ]
        out.append(f"Your Percentage is: {self.percentage:.2f} % in {label} standard")
        out.append(f"Your Grade you received in {label} standard is: {self.grade}")
        if self.passed:
            out.append("YOU HAVE PASSED!!! :)")
            return out
        out.append(f"You have failed in {self.failed} subjects")
        if self.failed > 1:
            out += ["YOU HAVE FAILED!!! :(", "PLEASE TRY AGAIN NEXT YEAR!!!", "BETTER LUCK NEXT TIME"]
        elif self.failed == 1:
            out += ["YOU HAVE FAILED!!! :(", "PLEASE TRY AGAIN!!!", "BETTER LUCK NEXT TIME"]
        return out


def evaluate(standard: Standard | int, scores: Sequence[int]) -> Report:
    """Grade the marks of a student in the given standard."""
    standard = Standard(standard)
    scores = _check_scores(scores)
    perc = percentage(scores)
    return Report(
        standard=standard,
        scores=scores,
        subject_grades=tuple(grade_for(s) for s in scores),
        percentage=perc,
        grade=grade_for(perc),
        failed=sum(1 for s in scores if s < PASS_MARK),
    )


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Grade marks in five subjects.").parse_args(argv)
    print("What Standard are you in?")
    try:
        text = input("Type 1 for 10th standard and Type 2 for 12th standard:").strip()
        standard = Standard(int(text))
    except (EOFError, ValueError):
        print("Invalid Standard Input")
        return 1

    print("Please enter the marks you received for each subject")
    scores = []
    for name in SUBJECTS:
        try:
            score = int(input(f"{name}:").strip())
        except (EOFError, ValueError):
            print(
                f"Invalid marks input for {name}. "
                "Please enter a valid integer between 0 and 100."
            )
            return 1
        if not 0 <= score <= 100:
            print(f"Invalid marks input for {name}. Please enter a number between 0 and 100.")
            return 1
        scores.append(score)

    for line in evaluate(standard, scores).lines():
        print(line)
    return 0
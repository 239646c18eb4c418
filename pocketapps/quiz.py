"""A six-question multiple choice quiz about the solar system."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Question:
    """A question with numbered options; ``answer`` is the 1-based correct option."""

    text: str
    options: tuple[str, ...]
    answer: int

    def is_correct(self, choice: int) -> bool:
        return choice == self.answer


QUESTIONS: tuple[Question, ...] = (
    Question("What is the largest planet in the solar system?",
             ("Earth", "Mercury", "Jupiter", "Venus"), 3),
    Question("What is the 4th planet in the solar system?",
             ("Jupiter", "Mercury", "Earth", "Mars"), 4),
    Question("What is the hottest planet in the solar system?",
             ("Venus", "Mercury", "Uranus", "Neptune"), 1),
    Question("What is the only other planet except earth that might support life in the solar system?",
             ("Jupiter", "Mars", "Venus", "Neptune"), 2),
    Question("Which planet has the most moons in the solar system?",
             ("Mercury", "Earth", "Venus", "Jupiter"), 4),
    Question("Which planet in the solar system can float on water?",
             ("Jupiter", "Saturn", "Venus", "Mercury"), 2),
)

COMMENTS: tuple[str, ...] = (
    "Terrible!!!",
    "Bad!!!",
    "Poor!!!",
    "Ok",
    "Good!!!",
    "Great!!!",
    "Amazing!!!",
)


def grade_comment(score: int) -> str:
    """Return the remark for a final score."""
    if not 0 <= score < len(COMMENTS):
        raise ValueError(f"score must be between 0 and {len(COMMENTS) - 1}, got {score}")
    return COMMENTS[score]


def score_answers(answers: Iterable[int]) -> int:
    """Count the correct answers; exactly one answer per question is required."""
    answers = list(answers)
    if len(answers) != len(QUESTIONS):
        raise ValueError(f"expected {len(QUESTIONS)} answers, got {len(answers)}")
    return sum(q.is_correct(a) for q, a in zip(QUESTIONS, answers))


def _read_choice() -> int | None:
    try:
        text = input()
    except EOFError:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Take the solar system quiz.").parse_args(argv)
    print("SOLAR SYSTEM QUIZ!!!")
    print(
        f"There will be {len(QUESTIONS)} questions, each with 4 options, "
        "type the number corresponding to your answer to choose."
    )
    score = 0
    for question in QUESTIONS:
        print(question.text)
        for number, option in enumerate(question.options, start=1):
            print(f"{number}- {option}")
        choice = _read_choice()
        if choice is not None and question.is_correct(choice):
            print("Correct ANSWER")
            score += 1
        else:
            print("Wrong ANSWER")
    print(grade_comment(score))
    print(f"Your score is {score} out of {len(QUESTIONS)}!!!")
    return 0
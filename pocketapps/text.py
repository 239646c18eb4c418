"""Reverse a line of text and check whether it reads the same backwards."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def reverse_text(text: str) -> str:
    """Return the text with its characters in reverse order."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """Whether the text equals its reverse; the check is case-sensitive."""
    return text == reverse_text(text)


def _read_line() -> str:
    try:
        return input()
    except EOFError:
        return ""


def reverse_main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Reverse a line of text.").parse_args(argv)
    print("What would you like to reverse:")
    print(f"Reversed: {reverse_text(_read_line())}")
    return 0


def palindrome_main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Check a line for being a palindrome.").parse_args(argv)
    print("What would you like to check:")
    if is_palindrome(_read_line()):
        print("It's a Palindrome.")
    else:
        print("It's not a Palindrome.")
    return 0
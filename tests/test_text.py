import io

import pytest

from pocketapps.text import is_palindrome, palindrome_main, reverse_main, reverse_text


def test_reverse_simple():
    assert reverse_text("abc") == "cba"


@pytest.mark.parametrize("text", ["", "a", "hello world", "ab ba!"])
def test_reverse_round_trip(text):
    assert reverse_text(reverse_text(text)) == text
    assert sorted(reverse_text(text)) == sorted(text)


@pytest.mark.parametrize("text", ["racecar", "abba", "a", ""])
def test_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["Racecar", "abc", "ab"])
def test_not_palindromes(text):
    assert is_palindrome(text) is False


def test_reverse_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert reverse_main([]) == 0
    out = capsys.readouterr().out
    assert out == "What would you like to reverse:\nReversed: cba\n"


def test_palindrome_main_yes(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("level\n"))
    assert palindrome_main([]) == 0
    assert "It's a Palindrome." in capsys.readouterr().out


def test_palindrome_main_no(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("levels\n"))
    assert palindrome_main([]) == 0
    assert "It's not a Palindrome." in capsys.readouterr().out
import io

import pytest

from pocketapps.patterns import fixed_patterns, main, triangle_patterns


def test_first_pattern_is_left_triangle():
    assert fixed_patterns()[0] == ["*", "* *", "* * *", "* * * *", "* * * * *"]


def test_second_pattern_mirrors_first():
    patterns = fixed_patterns()
    assert patterns[1] == list(reversed(patterns[0]))


def test_right_aligned_lines_share_width():
    right = fixed_patterns()[2]
    assert right[0] == "        *"
    assert right[-1] == "* * * * *"
    assert {len(line) for line in right} == {len(right[-1])}


def test_gallery_size():
    assert len(fixed_patterns()) == 19


def test_odd_diamond_is_symmetric():
    diamond = fixed_patterns()[17]
    assert diamond[0] == "            *"
    assert diamond == list(reversed(diamond))
    assert max(diamond, key=len) == diamond[len(diamond) // 2]


def test_even_diamond_starts_with_pair():
    diamond = fixed_patterns()[16]
    assert diamond[0] == "          * *"
    assert diamond == list(reversed(diamond))


def test_double_pattern():
    double = fixed_patterns()[-1]
    assert double[4] == "* * * * *  * * * * *"
    assert double[5] == ""
    assert double[:5] == list(reversed(double[6:]))


def test_gallery_returns_fresh_lists():
    first = fixed_patterns()
    first[0].append("extra")
    assert fixed_patterns()[0][-1] == "* * * * *"


@pytest.mark.parametrize("rows", [1, 3, 6])
def test_triangle_shapes(rows):
    down, up, shrinking, right = triangle_patterns(rows)
    assert all(len(p) == rows for p in (down, up, shrinking, right))
    assert shrinking == list(reversed(up))
    assert up[-1] == "*" * rows
    assert all(len(line) == rows for line in down + right)
    assert [line.count("*") for line in down] == list(range(rows, 0, -1))
    assert [line.lstrip() for line in right] == up


@pytest.mark.parametrize("rows", [0, -2])
def test_triangles_empty_for_non_positive_rows(rows):
    assert triangle_patterns(rows) == [[], [], [], []]


def test_main_reads_rows(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "How many rows do you want for these loop made patterns: " in out
    assert "* * * * *  * * * * *\n" in out
    assert out.endswith("***\n\n")


def test_main_takes_rows_argument(capsys):
    assert main(["2"]) == 0
    out = capsys.readouterr().out
    assert "How many rows" not in out
    assert out.endswith(" *\n**\n\n")


def test_main_rejects_non_number(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "Invalid row count" in capsys.readouterr().err
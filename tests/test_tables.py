import io

import pytest

from pocketapps.tables import grid_main, multiplication_table, table_main, table_sum, times_grid


@pytest.mark.parametrize("number,till", [(7, 3), (-4, 5), (0, 2), (12, 0)])
def test_table_invariants(number, till):
    table = multiplication_table(number, till)
    assert len(table) == till + 1
    assert table[0] == 0
    assert all(b - a == number for a, b in zip(table, table[1:]))


def test_negative_till_rejected():
    with pytest.raises(ValueError):
        multiplication_table(3, -1)


@pytest.mark.parametrize("number,till", [(7, 3), (5, 10)])
def test_table_sum_matches_table(number, till):
    assert table_sum(number, till) == sum(multiplication_table(number, till))


def test_grid_shape():
    grid = times_grid()
    assert len(grid) == 10
    assert all(len(line) == 40 for line in grid)
    assert grid[0].split() == [str(i) for i in range(1, 11)]


def test_grid_is_symmetric():
    rows = [line.split() for line in times_grid(6)]
    assert all(rows[i][j] == rows[j][i] for i in range(6) for j in range(6))


def test_table_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n2\n"))
    assert table_main([]) == 0
    out = capsys.readouterr().out
    assert "3 x 2 = 6\n" in out
    assert "The sum of all the numbers in the following 3 table is: 9 \n" in out
    assert "3 X 0 = 0 \n" in out


def test_table_main_rejects_negative(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n-2\n"))
    assert table_main([]) == 1
    assert "Invalid input" in capsys.readouterr().err


def test_grid_main(capsys):
    assert grid_main([]) == 0
    assert capsys.readouterr().out.splitlines() == times_grid()
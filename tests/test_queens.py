from itertools import combinations

import pytest

from tinyprogs.queens import main, render, solve


def _safe(solution):
    return all(
        a != b and abs(a - b) != j - i
        for (i, a), (j, b) in combinations(enumerate(solution), 2)
    )


def test_eight_queens_count():
    assert len(list(solve(8))) == 92


def test_four_queens_solutions():
    assert list(solve(4)) == [(1, 3, 0, 2), (2, 0, 3, 1)]


@pytest.mark.parametrize("n", [2, 3])
def test_unsolvable_sizes(n):
    assert list(solve(n)) == []


@pytest.mark.parametrize("n", [1, 5, 6, 7, 8])
def test_solutions_are_valid_and_sorted(n):
    solutions = list(solve(n))
    assert solutions
    assert all(_safe(s) and len(s) == n for s in solutions)
    assert solutions == sorted(set(solutions))


def test_render_marks_queens():
    board = render((1, 3, 0, 2))
    rows = board.splitlines()
    assert len(rows) == 4
    assert [row.index("Q") for row in rows] == [1, 3, 0, 2]
    assert rows[0] == ".Q. "


def test_main_default_size(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("No. ") == 92
    assert "\nNo. 92\n-----\n" in out


def test_main_invalid_size_falls_back(capsys):
    main(["zero"])
    first = capsys.readouterr().out
    main(["8"])
    assert capsys.readouterr().out == first


def test_main_small_board(capsys):
    main(["4"])
    out = capsys.readouterr().out
    assert out == "\nNo. 1\n-----\n" + render((1, 3, 0, 2)) + "\nNo. 2\n-----\n" + render((2, 0, 3, 1))
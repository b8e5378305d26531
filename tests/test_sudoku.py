import pytest

from tinyprogs.sudoku import PUZZLE, format_grid, is_available, solve

DIGITS = set(range(1, 10))


def test_solution_is_valid_and_keeps_givens():
    solved = solve(PUZZLE)
    assert solved is not None
    for r in range(9):
        assert set(solved[r]) == DIGITS
        assert {solved[i][r] for i in range(9)} == DIGITS
        for c in range(9):
            if PUZZLE[r][c]:
                assert solved[r][c] == PUZZLE[r][c]
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = {solved[br + i][bc + j] for i in range(3) for j in range(3)}
            assert box == DIGITS


def test_solve_does_not_modify_input():
    grid = [list(row) for row in PUZZLE]
    solve(grid)
    assert grid == [list(row) for row in PUZZLE]


def test_unsolvable_grid_returns_none():
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    grid[1][8] = 9
    assert solve(grid) is None


def test_solve_rejects_bad_shape():
    with pytest.raises(ValueError):
        solve([[0] * 9 for _ in range(8)])


def test_is_available_checks_row_column_and_box():
    grid = [list(row) for row in PUZZLE]
    assert is_available(grid, 0, 0, 9) is False  # in row 0
    assert is_available(grid, 0, 0, 1) is False  # in column 0
    assert is_available(grid, 0, 0, 5) is False  # in the top-left box
    assert is_available(grid, 0, 0, 3) is True


def test_format_grid_layout():
    solved = solve(PUZZLE)
    text = format_grid(solved)
    lines = text.splitlines()
    assert len(lines) == 13
    assert lines[0] == "+-----+-----+-----+"
    assert lines[4] == lines[8] == lines[12] == lines[0]
    assert lines[1] == "".join(f"|{v}" for v in solved[0]) + "|"
"""A backtracking sudoku solver."""

from __future__ import annotations

import sys

PUZZLE = (
    (0, 0, 0, 0, 0, 0, 0, 9, 0),
    (1, 9, 0, 4, 7, 0, 6, 0, 8),
    (0, 5, 2, 8, 1, 9, 4, 0, 7),
    (2, 0, 0, 0, 4, 8, 0, 0, 0),
    (0, 0, 9, 0, 0, 0, 5, 0, 0),
    (0, 0, 0, 7, 5, 0, 0, 0, 9),
    (9, 0, 7, 3, 6, 4, 1, 8, 0),
    (5, 0, 6, 0, 8, 1, 0, 7, 4),
    (0, 8, 0, 0, 0, 0, 0, 0, 0),
)

_RULE = "+-----+-----+-----+"


def is_available(grid, row: int, col: int, num: int) -> bool:
    """Return True if ``num`` appears in neither the row, column nor box of a cell."""
    row_start = row // 3 * 3
    col_start = col // 3 * 3
    return not any(
        grid[row][i] == num
        or grid[i][col] == num
        or grid[row_start + i % 3][col_start + i // 3] == num
        for i in range(9)
    )


def solve(grid) -> list[list[int]] | None:
    """Return a solved copy of a 9x9 grid (0 marks an empty cell), or None.

    Empty cells are filled in reading order, trying 1 to 9 in turn.
    """
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("a sudoku grid must have 9 rows of 9 cells")
    work = [list(row) for row in grid]
    empties = [(r, c) for r in range(9) for c in range(9) if work[r][c] == 0]

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        row, col = empties[index]
        for num in range(1, 10):
            if is_available(work, row, col, num):
                work[row][col] = num
                if fill(index + 1):
                    return True
                work[row][col] = 0
        return False

    return work if fill(0) else None


def format_grid(grid) -> str:
    """Draw a grid with a ruled line around each band of three rows."""
    lines = [_RULE]
    for number, row in enumerate(grid, start=1):
        lines.append("".join(f"|{value}" for value in row) + "|")
        if number % 3 == 0:
            lines.append(_RULE)
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Solve the built-in puzzle and print it."""
    solved = solve(PUZZLE)
    if solved is None:
        print("\n\nNO SOLUTION\n")
    else:
        print("\n" + format_grid(solved), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
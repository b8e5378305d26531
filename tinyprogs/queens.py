"""All solutions of the N-queens puzzle by backtracking."""

from __future__ import annotations

import sys
from collections.abc import Iterator


def solve(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens.

    Each solution is a tuple whose i-th entry is the column of the queen
    in row i.  Solutions come in lexicographic order.
    """
    placed: list[int] = []

    def extend() -> Iterator[tuple[int, ...]]:
        row = len(placed)
        if row == n:
            yield tuple(placed)
            return
        for column in range(n):
            if any(
                other == column or abs(other - column) == row - earlier
                for earlier, other in enumerate(placed)
            ):
                continue
            placed.append(column)
            yield from extend()
            placed.pop()

    return extend()


def render(solution: tuple[int, ...]) -> str:
    """Draw a solution as a checkered board with 'Q' for each queen."""
    size = len(solution)
    return "".join(
        "".join(
            "Q" if column == queen else (" " if (row + column) & 1 else ".")
            for column in range(size)
        )
        + "\n"
        for row, queen in enumerate(solution)
    )


def main(argv: list[str] | None = None) -> int:
    """Print every solution for the board size given (default 8)."""
    args = sys.argv[1:] if argv is None else argv
    try:
        n = int(args[0]) if args else 8
    except ValueError:
        n = 8
    if n <= 0:
        n = 8
    for number, solution in enumerate(solve(n), start=1):
        print(f"\nNo. {number}\n-----")
        print(render(solution), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Minesweeper on a curses terminal, with automatic play of trivially safe cells."""

from __future__ import annotations

import enum
import random
import sys
import time

_MIN_ROWS, _MAX_ROWS = 4, 200
_MIN_COLS, _MAX_COLS = 4, 400
_DIGITS = " 12345678"
_NEIGHBOURS = tuple(
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
)
_HELP = "move:hjkl flag:Ff step:Ss other:qd?"
_DEFAULTS = (20, 30, 25)


class Cell(enum.IntFlag):
    """State bits of one square of the field."""

    UNKNOWN = 1
    MINE = 2
    FLAG = 4


class UsageError(ValueError):
    """Raised when a command-line argument is not a plain decimal number."""


def _bind(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


class Minefield:
    """A rectangular field of hidden mines surrounded by a safe border.

    Coordinates passed to the methods are zero-based (row, col) pairs.
    """

    def __init__(self, rows: int = 20, cols: int = 30, percent: int = 25,
                 rng: random.Random | None = None) -> None:
        self.rows = _bind(rows, _MIN_ROWS, _MAX_ROWS)
        self.cols = _bind(cols, _MIN_COLS, _MAX_COLS)
        self.exploded: tuple[int, int] | None = None
        rng = rng if rng is not None else random.Random()
        self._grid = [
            [
                Cell.UNKNOWN if 1 <= i <= self.rows and 1 <= j <= self.cols else Cell(0)
                for j in range(self.cols + 2)
            ]
            for i in range(self.rows + 2)
        ]
        remaining = _bind(percent, 1, 99) * self.rows * self.cols // 100
        while remaining:
            i = 1 + rng.randrange(self.rows)
            j = 1 + rng.randrange(self.cols)
            if not self._grid[i][j] & Cell.MINE:
                self._grid[i][j] |= Cell.MINE
                remaining -= 1

    def _pos(self, row: int, col: int) -> tuple[int, int]:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) is outside the field")
        return row + 1, col + 1

    def _around(self, i: int, j: int):
        return ((i + di, j + dj) for di, dj in _NEIGHBOURS)

    def _count(self, i: int, j: int, prop: Cell) -> int:
        return sum(1 for ni, nj in self._around(i, j) if self._grid[ni][nj] & prop)

    def neighbour_count(self, row: int, col: int, prop: Cell) -> int:
        """Count the neighbours of a cell that have the property ``prop``."""
        return self._count(*self._pos(row, col), prop)

    def step(self, row: int, col: int) -> bool:
        """Step on a cell; return False if it was an unflagged mine."""
        i, j = self._pos(row, col)
        cell = self._grid[i][j]
        if cell & Cell.FLAG:
            return True
        if cell & Cell.MINE:
            self.exploded = (row, col)
            return False
        self._grid[i][j] = cell & ~Cell.UNKNOWN
        return True

    def autoplay(self, row: int, col: int) -> bool:
        """Step on a cell, then clear and flag every trivially decided cell.

        Returns False when a mine is hit; ``exploded`` then holds its position.
        """
        if not self.step(row, col):
            return False
        grid = self._grid
        changed = True
        while changed:
            changed = False
            for i in range(1, self.rows + 1):
                for j in range(1, self.cols + 1):
                    if grid[i][j] & Cell.UNKNOWN:
                        continue
                    mines = self._count(i, j, Cell.MINE)
                    if self._count(i, j, Cell.FLAG) == mines:
                        for ni, nj in self._around(i, j):
                            cell = grid[ni][nj]
                            if cell & Cell.UNKNOWN and not cell & Cell.FLAG:
                                if cell & Cell.MINE:
                                    self.exploded = (ni - 1, nj - 1)
                                    return False
                                grid[ni][nj] = cell & ~Cell.UNKNOWN
                                changed = True
                    elif self._count(i, j, Cell.UNKNOWN) == mines:
                        for ni, nj in self._around(i, j):
                            if grid[ni][nj] & Cell.UNKNOWN:
                                grid[ni][nj] |= Cell.FLAG
                                changed = True
        return True

    def toggle_flag(self, row: int, col: int) -> None:
        """Flag or unflag a cell that has not been uncovered."""
        i, j = self._pos(row, col)
        if self._grid[i][j] & Cell.UNKNOWN:
            self._grid[i][j] ^= Cell.FLAG

    def sure_flag(self, row: int, col: int) -> bool:
        """Toggle the flag on a cell, then autoplay from it."""
        self.toggle_flag(row, col)
        return self.autoplay(row, col)

    def render(self, reveal: bool = False) -> str:
        """Draw the field, one text line per row, cells separated by spaces.

        Uncovered cells show the number of unflagged mines around them.
        With ``reveal`` mines show as 'M' and wrongly placed flags as 'f'.
        """
        lines = []
        for i in range(1, self.rows + 1):
            chars = []
            for j in range(1, self.cols + 1):
                cell = self._grid[i][j]
                if not cell & Cell.UNKNOWN:
                    shown = self._count(i, j, Cell.MINE) - self._count(i, j, Cell.FLAG)
                    chars.append(_DIGITS[abs(shown)])
                elif cell & Cell.FLAG:
                    chars.append("F" if not reveal or cell & Cell.MINE else "f")
                elif reveal and cell & Cell.MINE:
                    chars.append("M")
                else:
                    chars.append("*")
            lines.append(" ".join(chars))
        return "\n".join(lines)


def _convert(text: str, name: str) -> int:
    if all(ch in "0123456789" for ch in text):
        return int(text) if text else 0
    raise UsageError(
        f"    use:  {name} [rows [columns [percentBombs]]]\n"
        f"default:  {name} {_DEFAULTS[0]} {_DEFAULTS[1]} {_DEFAULTS[2]}"
    )


def parse_args(argv: list[str]) -> tuple[int, int, int]:
    """Return (rows, columns, percent) from up to three numeric arguments."""
    values = list(_DEFAULTS)
    for position, text in enumerate(argv[:3]):
        values[position] = _convert(text, "minesweeper")
    rows, cols, percent = values
    return rows, cols, percent


def _draw(screen, field: Minefield, row: int, col: int) -> None:
    import curses

    for offset, line in enumerate(field.render().split("\n")):
        try:
            screen.addstr(1 + offset, 1, line)
        except curses.error:
            pass
    try:
        screen.move(row + 1, 2 * col + 1)
    except curses.error:
        pass
    screen.refresh()


def _play(screen, field: Minefield) -> tuple[int, int]:
    import curses

    curses.cbreak()
    curses.noecho()
    curses.nonl()
    row = col = 0
    actions = {"s": field.step, "S": field.autoplay, "F": field.sure_flag}
    while True:
        _draw(screen, field, row, col)
        key = screen.getch()
        ch = chr(key) if 0 <= key < 256 else ""
        low = ch.lower()
        if low == "q":
            break
        if ch == "?":
            try:
                screen.move(field.rows + 1, 1)
                screen.clrtoeol()
                screen.addstr(_HELP)
            except curses.error:
                pass
        elif low == "h":
            col = (col - 1) % field.cols
        elif low == "l":
            col = (col + 1) % field.cols
        elif low == "k":
            row = (row - 1) % field.rows
        elif low == "j":
            row = (row + 1) % field.rows
        elif ch == "f":
            field.toggle_flag(row, col)
        elif ch in actions:
            if not actions[ch](row, col):
                if field.exploded is not None:
                    row, col = field.exploded
                break
    return row, col


def main(argv: list[str] | None = None) -> int:
    """Play a game in the terminal; arguments are rows, columns and percent mines."""
    args = sys.argv[1:] if argv is None else argv
    try:
        rows, cols, percent = parse_args(args)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 0
    seed = int(time.time())
    print(f"seed is {seed}")
    field = Minefield(rows, cols, percent, random.Random(seed))

    import curses

    curses.wrapper(_play, field)
    print(field.render(reveal=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
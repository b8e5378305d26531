"""Tic-tac-toe against a perfect minimax opponent."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Iterator

HUMAN = 1
COMPUTER = -1
_SYMBOLS = "X O"
_INTRO = (
    "Board postions are numbered so:\n1 2 3\n4 5 6\n7 8 9\n"
    "You have O, I have X.\n\n"
)


class Board:
    """A 3x3 board: 0 is empty, 1 the human (O), -1 the computer (X)."""

    def __init__(self, cells=None) -> None:
        self.cells = [list(row) for row in cells] if cells is not None else [[0] * 3 for _ in range(3)]

    def winner(self) -> int:
        """Return the player holding a full line, or 0 if nobody does."""
        b = self.cells
        for i in range(3):
            if b[i][0] and b[i][1] == b[i][0] and b[i][2] == b[i][0]:
                return b[i][0]
            if b[0][i] and b[1][i] == b[0][i] and b[2][i] == b[0][i]:
                return b[0][i]
        if not b[1][1]:
            return 0
        if b[1][1] == b[0][0] and b[2][2] == b[0][0]:
            return b[0][0]
        if b[1][1] == b[2][0] and b[0][2] == b[1][1]:
            return b[1][1]
        return 0

    def _empty(self) -> list[tuple[int, int]]:
        return [(i, j) for i in range(3) for j in range(3) if not self.cells[i][j]]

    def _score(self, player: int) -> int:
        won = self.winner()
        if won:
            return 1 if won == player else -1
        empty = self._empty()
        if not empty:
            return 0
        best = -1
        for i, j in empty:
            self.cells[i][j] = player
            best = max(best, -self._score(-player))
            self.cells[i][j] = 0
        return best

    def best_move(self, player: int) -> int:
        """Return the position (0-8) of the best move for ``player``.

        Among equally good moves the first in reading order is chosen.
        """
        empty = self._empty()
        if not empty:
            raise ValueError("the board is full")
        best, choice = -1, empty[0]
        for i, j in empty:
            self.cells[i][j] = player
            score = -self._score(-player)
            self.cells[i][j] = 0
            if score > best:
                best, choice = score, (i, j)
        return choice[0] * 3 + choice[1]

    def place(self, position: int, player: int) -> None:
        """Put ``player``'s mark on an empty position from 0 to 8."""
        if not 0 <= position < 9:
            raise ValueError(f"position {position} is off the board")
        row, col = divmod(position, 3)
        if self.cells[row][col]:
            raise ValueError(f"position {position} is already taken")
        self.cells[row][col] = player

    def render(self) -> str:
        """Draw the board with X for the computer and O for the human."""
        rows = ("".join(f"{_SYMBOLS[v + 1]} " for v in row) + "\n" for row in self.cells)
        return "".join(rows) + "-----\n"


def game(human_first: bool, read_move: Callable[[], str], write: Callable[[str], None],
         rng: random.Random) -> str:
    """Play one game and return the closing message.

    ``read_move`` returns the human's next input token; invalid or taken
    positions are asked for again.
    """
    board = Board()
    write(_INTRO)
    user = human_first
    for turn in range(9):
        if user:
            while True:
                write("your move: ")
                try:
                    position = int(read_move()) - 1
                except ValueError:
                    continue
                try:
                    board.place(position, HUMAN)
                except ValueError:
                    continue
                break
        else:
            if turn == 0:
                position = rng.randrange(3) * 3 + rng.randrange(3)
            else:
                position = board.best_move(COMPUTER)
            board.place(position, COMPUTER)
            write(f"My move: {position + 1}\n")
        write(board.render())
        won = board.winner()
        if won:
            return "You win.\n\n" if won == HUMAN else "I win.\n\n"
        user = not user
    return "A draw.\n\n"


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Play games from standard input, taking turns to open, until input ends."""
    tokens = _tokens()

    def read_move() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    rng = random.Random()
    human_first = True
    try:
        while True:
            write(game(human_first, read_move, write, rng))
            human_first = not human_first
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())
"""Nibbles: steer a growing snake to the food on a curses terminal."""

from __future__ import annotations

import enum
import random
import sys
import time
from collections import deque
from dataclasses import dataclass

MAX_LENGTH = 100
_ESCAPE = 27


class Direction(enum.Enum):
    """Heading of the snake; NONE leaves it where it is."""

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


_STEPS = {
    Direction.NONE: (0, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_KEYS = {"a": Direction.LEFT, "w": Direction.UP, "d": Direction.RIGHT, "s": Direction.DOWN}


@dataclass(frozen=True)
class Point:
    """A position on the playing field."""

    x: int
    y: int


class Snake:
    """The snake's recent trail of head positions and its current length."""

    def __init__(self, width: int, height: int) -> None:
        centre_x, centre_y = width // 2, height // 2
        self._trail: deque[Point] = deque(
            [Point(0, 0)] * (MAX_LENGTH - 2), maxlen=MAX_LENGTH
        )
        self._trail.extend((Point(centre_x, centre_y), Point(centre_x, centre_y + 1)))
        self.length = 2

    def head(self) -> Point:
        """Return the position of the head."""
        return self._trail[-1]

    def tail(self) -> Point:
        """Return the cell the snake has just left, to be cleared on screen."""
        return self._trail[-1 - self.length % MAX_LENGTH]

    def move(self, direction: Direction) -> None:
        """Advance the head one cell in ``direction``."""
        dx, dy = _STEPS[direction]
        head = self.head()
        self._trail.append(Point(head.x + dx, head.y + dy))

    def is_dead(self, width: int, height: int) -> bool:
        """Return True if the head left the field or ran into the body."""
        head = self.head()
        if not (0 <= head.x < width and 0 <= head.y < height):
            return True
        if self.length > MAX_LENGTH:
            return True
        return head in list(self._trail)[-self.length:-1]

    def has_food(self, food: Point) -> bool:
        """Return True if the head is on the food."""
        return self.head() == food


def create_food(width: int, height: int, rng: random.Random) -> Point:
    """Place food at a random cell of a ``width`` by ``height`` field."""
    return Point(rng.randrange(width), rng.randrange(height))


def direction_for_key(key: str) -> Direction:
    """Map the w/a/s/d keys to a direction; any other key gives NONE."""
    return _KEYS.get(key, Direction.NONE)


def delay_for_length(length: int) -> float:
    """Seconds to wait between moves: shorter as the snake grows, at least 5 ms."""
    return max(5000, 100000 - length * 5000) / 1_000_000


def _put(screen, y: int, x: int, text: str, attr: int = 0) -> None:
    import curses

    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        pass


def _run(screen, rng: random.Random) -> None:
    import curses

    height, width = screen.getmaxyx()
    game_width, game_height = width // 2, height // 2
    food = create_food(game_width, game_height, rng)
    snake = Snake(game_width, game_height)
    direction = Direction.RIGHT

    left = width // 2 - game_width // 2 - 1
    right = left + game_width + 1
    top = height // 2 - game_height // 2 - 1
    bottom = top + game_height + 1

    curses.noecho()
    curses.cbreak()
    screen.timeout(0)
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.clear()

    while True:
        for x in range(left, right + 1):
            _put(screen, top, x, " ", curses.A_REVERSE)
            _put(screen, bottom, x, " ", curses.A_REVERSE)
        for y in range(top, bottom + 1):
            _put(screen, y, left, " ", curses.A_REVERSE)
            _put(screen, y, right, " ", curses.A_REVERSE)
        _put(screen, food.y + top + 1, food.x + left + 1, "@")
        head, tail = snake.head(), snake.tail()
        _put(screen, head.y + top + 1, head.x + left + 1, "o")
        _put(screen, tail.y + top + 1, tail.x + left + 1, " ")
        screen.refresh()

        key = screen.getch()
        chosen = direction_for_key(chr(key)) if 0 <= key < 256 else Direction.NONE
        if chosen is not Direction.NONE:
            direction = chosen

        snake.move(direction)
        dead = snake.is_dead(game_width, game_height)
        if snake.has_food(food):
            snake.length += 1
            food = create_food(game_width, game_height, rng)

        time.sleep(delay_for_length(snake.length))
        if key == _ESCAPE or dead:
            break

    _put(screen, height // 2, width // 2 - 5, "GAME OVER")
    screen.refresh()
    curses.nocbreak()
    screen.timeout(-1)
    screen.getch()


def main(argv: list[str] | None = None) -> int:
    """Play one game; steer with w/a/s/d, quit with Escape."""
    import curses

    curses.wrapper(_run, random.Random())
    return 0


if __name__ == "__main__":
    sys.exit(main())
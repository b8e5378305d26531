import random

import pytest

from tinyprogs.nibbles import (
    MAX_LENGTH,
    Direction,
    Point,
    Snake,
    create_food,
    delay_for_length,
    direction_for_key,
)


@pytest.mark.parametrize(
    "key, expected",
    [
        ("a", Direction.LEFT),
        ("w", Direction.UP),
        ("d", Direction.RIGHT),
        ("s", Direction.DOWN),
        ("x", Direction.NONE),
        ("A", Direction.NONE),
    ],
)
def test_direction_for_key(key, expected):
    assert direction_for_key(key) is expected


def test_delay_bounds():
    assert delay_for_length(0) == pytest.approx(0.1)
    assert delay_for_length(100) == pytest.approx(0.005)


def test_delay_never_increases():
    delays = [delay_for_length(n) for n in range(40)]
    assert delays == sorted(delays, reverse=True)
    assert min(delays) >= 0.005


def test_initial_snake():
    snake = Snake(10, 8)
    assert snake.length == 2
    assert snake.head() == Point(10 // 2, 8 // 2 + 1)
    assert snake.tail() == Point(0, 0)


def test_move_shifts_head():
    snake = Snake(10, 8)
    start = snake.head()
    snake.move(Direction.RIGHT)
    assert snake.head() == Point(start.x + 1, start.y)
    snake.move(Direction.UP)
    assert snake.head() == Point(start.x + 1, start.y - 1)
    snake.move(Direction.NONE)
    assert snake.head() == Point(start.x + 1, start.y - 1)


def test_tail_lags_by_length():
    snake = Snake(20, 20)
    start = snake.head()
    snake.move(Direction.RIGHT)
    snake.move(Direction.RIGHT)
    assert snake.tail() == start


def test_wall_kills():
    snake = Snake(4, 4)
    snake.move(Direction.DOWN)
    assert snake.is_dead(4, 4) is True


def test_short_snake_may_turn_back():
    snake = Snake(4, 4)
    snake.move(Direction.UP)
    assert snake.is_dead(4, 4) is False


def test_running_into_body_kills():
    snake = Snake(20, 20)
    snake.length = 5
    for direction in (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT):
        snake.move(direction)
    assert snake.is_dead(20, 20) is True


def test_short_loop_misses_tail():
    snake = Snake(20, 20)
    snake.length = 4
    for direction in (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT):
        snake.move(direction)
    assert snake.is_dead(20, 20) is False


def test_overlong_snake_dies():
    snake = Snake(20, 20)
    snake.length = MAX_LENGTH + 1
    snake.move(Direction.RIGHT)
    assert snake.is_dead(20, 20) is True


def test_has_food():
    snake = Snake(10, 10)
    ahead = Point(snake.head().x + 1, snake.head().y)
    assert snake.has_food(ahead) is False
    snake.move(Direction.RIGHT)
    assert snake.has_food(ahead) is True


def test_create_food_in_bounds_and_deterministic():
    points = [create_food(7, 5, random.Random(9)) for _ in range(2)]
    assert points[0] == points[1]
    rng = random.Random(1)
    for _ in range(200):
        food = create_food(7, 5, rng)
        assert 0 <= food.x < 7 and 0 <= food.y < 5
"""Small self-contained programs with reproducible output: hashing, number theory, digit spigots, puzzles, terminal games and ray tracing."""

__version__ = "0.1.0"

__all__ = [
    "md5",
    "primes",
    "digits",
    "trig",
    "queens",
    "minesweeper",
    "nibbles",
    "raytrace",
    "raytrace3",
    "sudoku",
    "tictactoe",
]
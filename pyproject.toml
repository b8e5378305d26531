[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyprogs"
version = "0.1.0"
description = "Small self-contained programs with reproducible output for checking arithmetic, recursion and control flow."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "md5",
    "primes",
    "mersenne",
    "pi",
    "spigot",
    "n-queens",
    "sudoku",
    "tic-tac-toe",
    "minesweeper",
    "snake",
    "ray tracing",
    "validation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyprogs-md5 = "tinyprogs.md5:main"
tinyprogs-primes = "tinyprogs.primes:main"
tinyprogs-digits = "tinyprogs.digits:main"
tinyprogs-sin = "tinyprogs.trig:main"
tinyprogs-queens = "tinyprogs.queens:main"
tinyprogs-minesweeper = "tinyprogs.minesweeper:main"
tinyprogs-nibbles = "tinyprogs.nibbles:main"
tinyprogs-ray = "tinyprogs.raytrace:main"
tinyprogs-ray3 = "tinyprogs.raytrace3:main"
tinyprogs-sudoku = "tinyprogs.sudoku:main"
tinyprogs-tictactoe = "tinyprogs.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyprogs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

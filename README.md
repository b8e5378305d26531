# tinyprogs

Small, self-contained programs with well-known, reproducible output. Use them
to check that arithmetic, bit manipulation, recursion and control flow behave
as expected, or just to play a game in the terminal. The package has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command                 | What it does                                                  |
|-------------------------|---------------------------------------------------------------|
| `tinyprogs-md5`         | MD5 digests of the given strings, or of the RFC 1321 test set |
| `tinyprogs-primes`      | Primes below 10000, or a factor of a Mersenne number          |
| `tinyprogs-digits`      | 600 four-digit groups of pi, or square-root-of-two groups     |
| `tinyprogs-sin`         | A table of a Taylor-series sine from -pi to pi                |
| `tinyprogs-queens`      | Every solution of the N-queens puzzle (default N = 8)         |
| `tinyprogs-sudoku`      | Solves a built-in sudoku puzzle by backtracking               |
| `tinyprogs-tictactoe`   | Tic-tac-toe against a minimax opponent                        |
| `tinyprogs-minesweeper` | Minesweeper in the terminal                                   |
| `tinyprogs-nibbles`     | The snake game in the terminal                                |
| `tinyprogs-ray`         | An ASCII picture of a sphere from a simple ray caster         |
| `tinyprogs-ray3`        | A ray-traced scene of three spheres written as a PPM image    |

Some commands take arguments:

```
tinyprogs-md5 abc "message digest"
tinyprogs-primes mersenne 929
tinyprogs-digits sqrt2
tinyprogs-queens 6
tinyprogs-ray 20
tinyprogs-ray3 scene.ppm
tinyprogs-minesweeper 20 30 25
```

- `tinyprogs-primes mersenne [q]` prints the smallest divisor of `2^q - 1` of
  the form `2kq + 1` (`q` defaults to 929 and must be prime).
- `tinyprogs-ray3` writes an 80x60 image to `image.ppm` unless a path is given.
- `tinyprogs-tictactoe` reads moves (positions 1 to 9) from standard input and
  plays game after game, taking turns to open, until input ends.

In minesweeper the arguments are rows, columns and the percentage of mines
(defaults 20, 30 and 25). Move with `h` `j` `k` `l`, toggle a flag with `f`,
step with `s`, step and then let the program clear and flag every trivially
decided square with `S`, toggle a flag and do the same with `F`, show the key
help with `?`, and quit with `q`. When the game ends the whole field is shown,
with mines as `M` and wrongly placed flags as `f`.

In nibbles, steer with `w` `a` `s` `d`; `Esc` ends the game.

## Using the library

```python
from tinyprogs.md5 import Md5, md5_hex
from tinyprogs.primes import is_prime, primes_below, mersenne_factor
from tinyprogs.queens import solve, render
from tinyprogs.sudoku import PUZZLE, solve as solve_sudoku, format_grid

md5_hex(b"abc")            # '900150983cd24fb0d6963f7d28e17f72'

h = Md5(b"message ")
h.update(b"digest")
h.hexdigest()              # 'f96b697d7cb7938d525a2f31aaf161d0'

is_prime(97)               # True
list(primes_below(20))     # [2, 3, 5, 7, 11, 13, 17, 19]

first = next(solve(8))     # column of the queen in each row
print(render(first))

print(format_grid(solve_sudoku(PUZZLE)))
```

Other modules:

- `tinyprogs.digits`: `pi_digit_groups()` and `sqrt2_digit_groups()` generators.
- `tinyprogs.trig`: `taylor_sin(x)` in single precision and `sine_table()`.
- `tinyprogs.tictactoe`: `Board` with `winner()`, `best_move(player)`,
  `place(position, player)` and `render()`, and `game(...)` for one game with
  your own input and output functions.
- `tinyprogs.minesweeper`: `Minefield` with `step`, `autoplay`, `toggle_flag`,
  `sure_flag`, `neighbour_count` and `render(reveal)`; pass a `random.Random`
  for a reproducible field.
- `tinyprogs.nibbles`: `Snake`, `Direction`, `Point`, `create_food`,
  `direction_for_key` and `delay_for_length`.
- `tinyprogs.raytrace`: `Vector`, `Sphere`, `Ray`, `intersects` and
  `render_ascii(size)`.
- `tinyprogs.raytrace3`: `fast_sqrt`, `intersect_distance`, `default_scene()`,
  `render(width, height, scene)` returning raw RGB bytes, and `write_ppm`.

Each module also has a `main(argv=None)` function, which is what the commands
above call.

## Limitations

The minesweeper and nibbles games draw with the standard `curses` module, so
they need a terminal where `curses` is available; on Windows that module is
not part of a plain Python install and the two games will not start. Their
game logic (`Minefield`, `Snake`) works everywhere. The ray tracers produce
text and PPM files only; there is no window or image viewer.
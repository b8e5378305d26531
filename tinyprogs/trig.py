"""Sine by a truncated Taylor series, in single precision."""

from __future__ import annotations

import struct
import sys

_FACT_5 = 2.0 * 3 * 4 * 5
_FACT_9 = 2.0 * 3 * 4 * 5 * 6 * 7 * 8 * 9
_FACT_13 = 2.0 * 3 * 4 * 5 * 6 * 7 * 8 * 9 * 10 * 11 * 12 * 13


def _single(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


PI = _single(3.14159265359)


def taylor_sin(x: float) -> float:
    """Approximate sin(x) with the Taylor series through the x**15 term.

    The series is evaluated in double precision and the result rounded
    to single precision.
    """
    x2 = x * x
    x4 = x2 * x2
    t1 = x * (1.0 - x2 / (2 * 3))
    x5 = x * x4
    t2 = x5 * (1.0 - x2 / (6 * 7)) / _FACT_5
    x9 = x5 * x4
    t3 = x9 * (1.0 - x2 / (10 * 11)) / _FACT_9
    x13 = x9 * x4
    t4 = x13 * (1.0 - x2 / (14 * 15)) / _FACT_13
    return _single(t4 + t3 + t2 + t1)


def sine_table() -> list[tuple[float, float]]:
    """Return (x, sin(x)) pairs for x from -pi to pi in steps of pi/16."""
    step = _single(PI / 16)
    stop = _single(PI + _single(0.01))
    table = []
    x = -PI
    while x <= stop:
        table.append((x, taylor_sin(x)))
        x = _single(x + step)
    return table


def main(argv: list[str] | None = None) -> int:
    """Print the sine table."""
    for x, value in sine_table():
        print(f"sin({x:.4f}): {value:.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Spigot algorithms that stream the digits of pi and of the square root of two."""

from __future__ import annotations

import sys
from collections.abc import Iterator


def pi_digit_groups() -> Iterator[int]:
    """Yield 600 groups of four decimal digits of pi, starting with 3141."""
    base = 10000
    terms = 8400
    remainders = [base // 5] * terms + [0]
    carry = 0
    while terms:
        acc = 0
        denominator = terms * 2
        position = terms
        while True:
            acc += remainders[position] * base
            denominator -= 1
            remainders[position] = acc % denominator
            acc //= denominator
            denominator -= 1
            position -= 1
            if not position:
                break
            acc *= position
        terms -= 14
        yield carry + acc // base
        carry = acc % base


def sqrt2_digit_groups() -> Iterator[int]:
    """Yield 800 groups of three decimal digits of ten times the square root of two."""
    base = 1000
    terms = 1413
    remainders = [14] * terms
    for _ in range(800):
        acc = 0
        for k in range(terms - 1, 0, -1):
            acc += remainders[k] * base
            divisor = 100 * k
            remainders[k] = acc % divisor
            acc = acc // divisor * (2 * k - 1)
        acc += remainders[0] * base
        yield acc // base
        remainders[0] = acc % base


def main(argv: list[str] | None = None) -> int:
    """Print pi digit groups, or square-root-of-two groups with ``sqrt2``."""
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] == "sqrt2":
        for group in sqrt2_digit_groups():
            print(f"{group:03d}")
    else:
        for group in pi_digit_groups():
            print(f"{group:04d}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Trial-division primality tests and Mersenne-number factor search."""

from __future__ import annotations

import sys
from collections.abc import Iterator


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, by trial division up to its square root."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def is_prime_wheel(n: int) -> bool:
    """Return True if ``n`` is prime, trying only divisors of the form 6k +/- 1."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    if n % 3 == 0:
        return n == 3
    divisor = 5
    while divisor * divisor <= n:
        if n % divisor == 0 or n % (divisor + 2) == 0:
            return False
        divisor += 6
    return True


def primes_below(limit: int) -> Iterator[int]:
    """Yield the primes from 1 up to, but not including, ``limit``."""
    return (n for n in range(1, limit) if is_prime(n))


def mersenne_factor(q: int) -> int:
    """Return the smallest divisor of 2**q - 1 of the form 2kq + 1.

    When no such proper divisor exists the Mersenne number itself is returned.
    Raises ValueError if ``q`` is not prime.
    """
    if not is_prime_wheel(q):
        raise ValueError(f"exponent {q} is not prime")
    mersenne = (1 << q) - 1
    candidate = 2 * q + 1
    while candidate <= mersenne:
        if pow(2, q, candidate) == 1:
            return candidate
        candidate += 2 * q
    return mersenne


def main(argv: list[str] | None = None) -> int:
    """List primes below 10000, or with ``mersenne [q]`` factor 2**q - 1."""
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] == "mersenne":
        q = int(args[1]) if len(args) > 1 else 929
        try:
            divisor = mersenne_factor(q)
        except ValueError:
            return 1
        print(f"2^{q} - 1 = 0 (mod {divisor})")
        return 0
    print("primes, 1-100000: ")
    print("".join(f"{p} " for p in primes_below(10000)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
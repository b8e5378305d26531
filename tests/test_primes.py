import pytest

from tinyprogs.primes import (
    is_prime,
    is_prime_wheel,
    main,
    mersenne_factor,
    primes_below,
)


def test_small_primes():
    assert list(primes_below(20)) == [2, 3, 5, 7, 11, 13, 17, 19]


def test_one_is_not_prime():
    assert not is_prime(1)
    assert not is_prime_wheel(1)


def test_both_tests_agree():
    assert all(is_prime(n) == is_prime_wheel(n) for n in range(-5, 3000))


def test_squares_are_composite():
    assert not any(is_prime(p * p) for p in primes_below(100))


def test_primes_below_respects_limit():
    found = list(primes_below(1000))
    assert max(found) < 1000
    assert found == sorted(found)
    assert all(is_prime_wheel(p) for p in found)


def test_mersenne_factor_small():
    assert mersenne_factor(11) == 23


def test_mersenne_factor_929():
    assert mersenne_factor(929) == 13007


@pytest.mark.parametrize("q", [3, 5, 7, 11, 13, 23, 29, 37])
def test_mersenne_factor_invariants(q):
    divisor = mersenne_factor(q)
    assert ((1 << q) - 1) % divisor == 0
    assert divisor % (2 * q) == 1
    smaller = range(2 * q + 1, divisor, 2 * q)
    assert all(((1 << q) - 1) % d != 0 for d in smaller)


def test_mersenne_prime_returns_itself():
    assert mersenne_factor(7) == 127


def test_mersenne_rejects_composite_exponent():
    with pytest.raises(ValueError):
        mersenne_factor(15)


def test_main_mersenne(capsys):
    assert main(["mersenne"]) == 0
    assert capsys.readouterr().out == "2^929 - 1 = 0 (mod 13007)\n"


def test_main_mersenne_composite_fails():
    assert main(["mersenne", "9"]) == 1


def test_main_primes(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "primes, 1-100000: "
    assert lines[1].split() == [str(p) for p in primes_below(10000)]
from __future__ import annotations

import pytest

from cli_utils.math_utils import factorial, gcd, is_prime, lcm


def test_factorial() -> None:
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(5) == 120
    assert factorial(6) == 720
    assert factorial(20) == 2432902008176640000


def test_factorial_too_large_is_recoverable() -> None:
    with pytest.raises(OverflowError, match="Factorial input too large"):
        factorial(21)


def test_factorial_negative() -> None:
    with pytest.raises(ValueError):
        factorial(-1)


def test_gcd() -> None:
    assert gcd(48, 18) == 6
    assert gcd(17, 19) == 1
    assert gcd(100, 25) == 25
    assert gcd(0, 5) == 5
    assert gcd(5, 0) == 5


def test_lcm() -> None:
    assert lcm(4, 6) == 12
    assert lcm(7, 9) == 63
    assert lcm(12, 18) == 36
    assert lcm(0, 5) == 0
    assert lcm(5, 0) == 0


@pytest.mark.parametrize(
    "n,expected",
    [(0, False), (1, False), (2, True), (3, True), (4, False), (9, False), (17, True), (25, False), (97, True), (7919, True)],
)
def test_is_prime(n: int, expected: bool) -> None:
    assert is_prime(n) is expected

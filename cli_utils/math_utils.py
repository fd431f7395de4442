from __future__ import annotations

from math import isqrt

# 21! no longer fits in an unsigned 64-bit integer.
MAX_FACTORIAL_INPUT = 20


def factorial(n: int) -> int:
    """Return n! for 0 <= n <= 20.

    Raises OverflowError above MAX_FACTORIAL_INPUT and ValueError for negative n.
    """
    if n < 0:
        raise ValueError(f"Factorial is undefined for negative input: {n}")
    if n > MAX_FACTORIAL_INPUT:
        raise OverflowError(f"Factorial input too large (max {MAX_FACTORIAL_INPUT} to prevent overflow)")
    out = 1
    for k in range(2, n + 1):
        out *= k
    return out


def gcd(a: int, b: int) -> int:
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    for i in range(3, isqrt(n) + 1, 2):
        if n % i == 0:
            return False
    return True

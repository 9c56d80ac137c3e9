"""Small exercises on single integers."""

from __future__ import annotations

import math
from enum import Enum


class Sign(Enum):
    """Sign of an integer."""

    NEGATIVE = "Negative"
    ZERO = "Zero"
    POSITIVE = "Positive"


def classify_sign(num: int) -> Sign:
    """Return whether ``num`` is negative, zero or positive."""
    if num < 0:
        return Sign.NEGATIVE
    if num == 0:
        return Sign.ZERO
    return Sign.POSITIVE


def _digits(num: int) -> list[int]:
    return [int(ch) for ch in str(abs(num))]


def is_armstrong(num: int) -> bool:
    """True if the sum of the cubes of the digits of ``num`` equals ``num``.

    The sign is carried through, so ``-153`` counts just as ``153`` does.
    """
    return sum(digit**3 for digit in _digits(num)) == abs(num)


def factorial(num: int) -> int:
    """Product of 1..num; 1 for zero or negative input."""
    return math.prod(range(1, num + 1))


def fibonacci_series(count: int) -> list[int]:
    """The first ``count`` Fibonacci terms, always at least ``[0, 1]``."""
    series = [0, 1]
    while len(series) < count:
        series.append(series[-2] + series[-1])
    return series


def _require_positive(*values: int) -> None:
    for value in values:
        if value <= 0:
            raise ValueError(f"expected a positive integer, got {value}")


def gcd(x: int, y: int) -> int:
    """Greatest common divisor of two positive integers."""
    _require_positive(x, y)
    candidate = min(x, y)
    while x % candidate or y % candidate:
        candidate -= 1
    return candidate


def lcm(x: int, y: int) -> int:
    """Least common multiple of two positive integers."""
    _require_positive(x, y)
    return x * y // gcd(x, y)


def largest_of_three(a: int, b: int, c: int) -> int:
    """The largest of three numbers."""
    return max(a, b, c)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)


def is_even(num: int) -> bool:
    """True if ``num`` is divisible by two."""
    return num % 2 == 0


def reverse_integer(num: int) -> int:
    """Reverse the decimal digits of ``num``, keeping its sign."""
    sign = -1 if num < 0 else 1
    return sign * int(str(abs(num))[::-1])


def is_palindrome_number(num: int) -> bool:
    """True if ``num`` reads the same with its digits reversed."""
    return reverse_integer(num) == num


def is_prime(num: int) -> bool:
    """Trial-division primality test."""
    if num <= 1:
        return False
    return all(num % divisor for divisor in range(2, math.isqrt(num) + 1))


def multiplication_table(num: int) -> list[str]:
    """Lines of the form ``'n * i = p'`` for i from 1 to 10."""
    return [f"{num} * {i} = {num * i}" for i in range(1, 11)]


def swap(a, b):
    """Return the two values in swapped order."""
    return b, a
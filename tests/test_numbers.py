import calendar
import itertools
import math

import pytest

from drills.numbers import (
    Sign,
    classify_sign,
    factorial,
    fibonacci_series,
    gcd,
    is_armstrong,
    is_even,
    is_leap_year,
    is_palindrome_number,
    is_prime,
    largest_of_three,
    lcm,
    multiplication_table,
    reverse_integer,
    swap,
)


@pytest.mark.parametrize(
    "num, expected",
    [(-5, Sign.NEGATIVE), (0, Sign.ZERO), (10, Sign.POSITIVE)],
)
def test_classify_sign(num, expected):
    assert classify_sign(num) is expected


def test_armstrong_known_value():
    assert is_armstrong(153) is True
    assert is_armstrong(154) is False


@pytest.mark.parametrize("num", range(0, 1000, 7))
def test_armstrong_ignores_sign(num):
    assert is_armstrong(num) == is_armstrong(-num)


@pytest.mark.parametrize("num", range(0, 13))
def test_factorial_matches_math(num):
    assert factorial(num) == math.factorial(num)


def test_factorial_of_negative_is_one():
    assert factorial(-3) == 1


@pytest.mark.parametrize("count", [-1, 0, 1, 2])
def test_fibonacci_always_starts_with_two_terms(count):
    assert fibonacci_series(count) == [0, 1]


@pytest.mark.parametrize("count", [3, 5, 10, 20])
def test_fibonacci_recurrence(count):
    series = fibonacci_series(count)
    assert len(series) == count
    assert series[:2] == [0, 1]
    for a, b, c in zip(series, series[1:], series[2:]):
        assert c == a + b


@pytest.mark.parametrize("x, y", [(15, 25), (7, 13), (12, 18), (1, 1), (100, 10)])
def test_gcd_and_lcm_match_math(x, y):
    assert gcd(x, y) == math.gcd(x, y)
    assert lcm(x, y) == x * y // math.gcd(x, y)
    assert gcd(x, y) * lcm(x, y) == x * y


@pytest.mark.parametrize("func", [gcd, lcm])
@pytest.mark.parametrize("x, y", [(0, 5), (5, 0), (-3, 4)])
def test_gcd_lcm_reject_non_positive(func, x, y):
    with pytest.raises(ValueError):
        func(x, y)


@pytest.mark.parametrize("values", [(9, 10, 22), (5, 5, 1), (-1, -2, -3)])
def test_largest_of_three_any_order(values):
    for perm in itertools.permutations(values):
        assert largest_of_three(*perm) == max(values)


def test_leap_year_matches_calendar():
    for year in range(1, 2500):
        assert is_leap_year(year) == calendar.isleap(year)


@pytest.mark.parametrize("num", range(-10, 11))
def test_even_alternates(num):
    assert is_even(num) != is_even(num + 1)
    assert is_even(2 * num)


@pytest.mark.parametrize("num", [1, 12345, 987, 1001, 42])
def test_reverse_integer_round_trip(num):
    assert reverse_integer(reverse_integer(num)) == num
    assert reverse_integer(-num) == -reverse_integer(num)


def test_reverse_integer_value():
    assert reverse_integer(12345) == 54321


@pytest.mark.parametrize("half", ["1", "12", "907", "45"])
def test_palindrome_numbers(half):
    assert is_palindrome_number(int(half + half[::-1]))
    assert is_palindrome_number(int(half + half[-2::-1]))


def test_non_palindrome_number():
    assert not is_palindrome_number(12345)


@pytest.mark.parametrize("num", [-7, 0, 1])
def test_small_numbers_not_prime(num):
    assert not is_prime(num)


def test_products_are_not_prime():
    for p in range(2, 20):
        for q in range(2, 20):
            assert not is_prime(p * q)


def test_prime_count_below_100():
    assert sum(is_prime(n) for n in range(100)) == 25
    assert is_prime(2) and is_prime(3)


def test_multiplication_table():
    table = multiplication_table(7)
    assert len(table) == 10
    assert table[0] == "7 * 1 = 7"
    for i, line in enumerate(table, start=1):
        left, product = line.split(" = ")
        a, b = (int(part) for part in left.split(" * "))
        assert (a, b) == (7, i)
        assert int(product) == a * b


def test_swap():
    assert swap(3, 8) == (8, 3)
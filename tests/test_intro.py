import math

import pytest

from practice_utils import calculate_average, factorial, fizz_buzz, maximum


@pytest.mark.parametrize("a, b, expected", [(2, 1, 2), (1, 2, 2), (1, 1, 1)])
def test_maximum(a: int, b: int, expected: int) -> None:
    assert maximum(a, b) == expected


def test_maximum_returns_first_argument_when_equal() -> None:
    first, second = 1.0, 1
    assert maximum(first, second) is first


@pytest.mark.parametrize(
    "n, expected",
    [(15, "FizzBuzz"), (30, "FizzBuzz"), (3, "Fizz"), (9, "Fizz"), (5, "Buzz"), (10, "Buzz"), (1, "1"), (7, "7")],
)
def test_fizz_buzz(n: int, expected: str) -> None:
    assert fizz_buzz(n) == expected


def test_calculate_average_of_empty_sequence_is_nan() -> None:
    assert math.isnan(calculate_average([]))


@pytest.mark.parametrize(
    "numbers, expected", [([1], 1), ([1, 2], 1.5), ([1, 2, 3], 2)]
)
def test_calculate_average(numbers: list, expected: float) -> None:
    assert calculate_average(numbers) == expected


@pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (2, 2), (3, 6), (4, 24)])
def test_factorial(n: int, expected: int) -> None:
    assert factorial(n) == expected


def test_factorial_of_negative_number_is_none() -> None:
    assert factorial(-1) is None

import math
from typing import Optional, Sequence


def maximum(a: float, b: float) -> float:
    return a if a >= b else b


def fizz_buzz(n: int) -> str:
    if n % 15 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def calculate_average(numbers: Sequence[float]) -> float:
    # empty input yields NaN rather than raising
    if not numbers:
        return math.nan
    return sum(numbers) / len(numbers)


def factorial(n: int) -> Optional[int]:
    if n < 0:
        return None
    return math.factorial(n)

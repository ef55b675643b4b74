"""Numeric helpers."""

import math
import re
import statistics
from collections.abc import Iterable, Sequence
from functools import reduce

from fnkit.domain.errors import InvalidArgumentError

Number = int | float


def array_sum(arr: Iterable[Number]) -> Number:
    return sum(arr)


def array_average(arr: Sequence[Number]) -> float:
    if not arr:
        raise InvalidArgumentError("Cannot average an empty sequence")
    return sum(arr) / len(arr)


def median(arr: Sequence[Number]) -> Number:
    if not arr:
        raise InvalidArgumentError("Cannot take the median of an empty sequence")
    return statistics.median(arr)


def percentile(arr: Sequence[Number], value: Number) -> float:
    """
    Percentage of values below ``value``; equal values count as half.

    Example:
        >>> percentile([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 6)
        55.0
    """
    if not arr:
        raise InvalidArgumentError("Cannot take a percentile of an empty sequence")
    below = sum(1 for v in arr if v < value)
    equal = sum(1 for v in arr if v == value)
    return 100 * (below + 0.5 * equal) / len(arr)


def collatz(n: int) -> int:
    """Next term of the Collatz sequence."""
    return n // 2 if n % 2 == 0 else 3 * n + 1


def digitize(n: int) -> list[int]:
    """Digits of an integer, ignoring its sign."""
    return [int(d) for d in str(abs(n))]


def distance(x0: Number, y0: Number, x1: Number, y1: Number) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x1 - x0, y1 - y0)


def factorial(n: int) -> int:
    if n < 0:
        raise InvalidArgumentError("Negative numbers are not allowed")
    return math.factorial(n)


def fibonacci(n: int) -> list[int]:
    """
    The first ``n`` Fibonacci numbers, starting at 0.

    Example:
        >>> fibonacci(6)
        [0, 1, 1, 2, 3, 5]
    """
    sequence: list[int] = []
    a, b = 0, 1
    for _ in range(n):
        sequence.append(a)
        a, b = b, a + b
    return sequence


def gcd(x: int, y: int) -> int:
    return math.gcd(x, y)


def lcm(x: int, y: int) -> int:
    return math.lcm(x, y)


def hamming_distance(a: int, b: int) -> int:
    """Number of differing bits between two non-negative integers."""
    return bin(a ^ b).count("1")


def is_divisible(dividend: int, divisor: int) -> bool:
    return dividend % divisor == 0


def is_even(num: int) -> bool:
    return num % 2 == 0


def palindrome(text: str) -> bool:
    """Palindrome check ignoring case and anything but letters and digits."""
    cleaned = re.sub(r"[\W_]", "", text.lower())
    return cleaned == cleaned[::-1]


def powerset(arr: Iterable[object]) -> list[list[object]]:
    """
    All subsets, each new element prefixed onto the subsets built so far.

    Example:
        >>> powerset([1, 2])
        [[], [1], [2], [2, 1]]
    """
    return reduce(
        lambda subsets, item: subsets + [[item, *subset] for subset in subsets],
        arr,
        [[]],
    )

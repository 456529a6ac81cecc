"""Solutions to problems 11 to 20 (problem 13 lives in its own module)."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from functools import lru_cache
from math import comb, factorial, prod

from eulerkit.numtheory import digits_of, divisor_count

GRID_20 = (
    (8, 2, 22, 97, 38, 15, 0, 40, 0, 75, 4, 5, 7, 78, 52, 12, 50, 77, 91, 8),
    (49, 49, 99, 40, 17, 81, 18, 57, 60, 87, 17, 40, 98, 43, 69, 48, 4, 56, 62, 0),
    (81, 49, 31, 73, 55, 79, 14, 29, 93, 71, 40, 67, 53, 88, 30, 3, 49, 13, 36, 65),
    (52, 70, 95, 23, 4, 60, 11, 42, 69, 24, 68, 56, 1, 32, 56, 71, 37, 2, 36, 91),
    (22, 31, 16, 71, 51, 67, 63, 89, 41, 92, 36, 54, 22, 40, 40, 28, 66, 33, 13, 80),
    (24, 47, 32, 60, 99, 3, 45, 2, 44, 75, 33, 53, 78, 36, 84, 20, 35, 17, 12, 50),
    (32, 98, 81, 28, 64, 23, 67, 10, 26, 38, 40, 67, 59, 54, 70, 66, 18, 38, 64, 70),
    (67, 26, 20, 68, 2, 62, 12, 20, 95, 63, 94, 39, 63, 8, 40, 91, 66, 49, 94, 21),
    (24, 55, 58, 5, 66, 73, 99, 26, 97, 17, 78, 78, 96, 83, 14, 88, 34, 89, 63, 72),
    (21, 36, 23, 9, 75, 0, 76, 44, 20, 45, 35, 14, 0, 61, 33, 97, 34, 31, 33, 95),
    (78, 17, 53, 28, 22, 75, 31, 67, 15, 94, 3, 80, 4, 62, 16, 14, 9, 53, 56, 92),
    (16, 39, 5, 42, 96, 35, 31, 47, 55, 58, 88, 24, 0, 17, 54, 24, 36, 29, 85, 57),
    (86, 56, 0, 48, 35, 71, 89, 7, 5, 44, 44, 37, 44, 60, 21, 58, 51, 54, 17, 58),
    (19, 80, 81, 68, 5, 94, 47, 69, 28, 73, 92, 13, 86, 52, 17, 77, 4, 89, 55, 40),
    (4, 52, 8, 83, 97, 35, 99, 16, 7, 97, 57, 32, 16, 26, 26, 79, 33, 27, 98, 66),
    (88, 36, 68, 87, 57, 62, 20, 72, 3, 46, 33, 67, 46, 55, 12, 32, 63, 93, 53, 69),
    (4, 42, 16, 73, 38, 25, 39, 11, 24, 94, 72, 18, 8, 46, 29, 32, 40, 62, 76, 36),
    (20, 69, 36, 41, 72, 30, 23, 88, 34, 62, 99, 69, 82, 67, 59, 85, 74, 4, 36, 16),
    (20, 73, 35, 29, 78, 31, 90, 1, 74, 31, 49, 71, 48, 86, 81, 16, 23, 57, 5, 54),
    (1, 70, 54, 71, 83, 51, 54, 69, 16, 92, 33, 48, 61, 43, 52, 1, 89, 19, 67, 48),
)

PYRAMID_15 = (
    (75,),
    (95, 64),
    (17, 47, 82),
    (18, 35, 87, 10),
    (20, 4, 82, 47, 65),
    (19, 1, 23, 75, 3, 34),
    (88, 2, 77, 73, 7, 63, 67),
    (99, 65, 4, 28, 6, 16, 70, 92),
    (41, 41, 26, 56, 83, 40, 80, 70, 33),
    (41, 48, 72, 33, 47, 32, 37, 16, 94, 29),
    (53, 71, 44, 65, 25, 43, 91, 52, 97, 51, 14),
    (70, 11, 33, 28, 77, 73, 17, 78, 39, 68, 17, 57),
    (91, 71, 52, 38, 17, 14, 91, 43, 58, 50, 27, 29, 48),
    (63, 66, 4, 68, 89, 53, 67, 30, 73, 16, 69, 87, 40, 31),
    (4, 62, 98, 27, 23, 9, 70, 98, 73, 93, 38, 53, 60, 4, 23),
)

# Right, down, down-right (\) and up-right (/).
_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (-1, 1))

_ONES = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty",
    "ninety",
)


def max_grid_product(grid: Sequence[Sequence[int]], length: int) -> int:
    """Greatest product of ``length`` adjacent cells in a line in any direction.

    Lines run horizontally, vertically and along both diagonals. Returns 0
    when no line of that length fits in the grid.
    """
    if length < 1:
        raise ValueError(f"length must be positive, got {length}")
    height = len(grid)
    best = 0
    for r, row in enumerate(grid):
        for c in range(len(row)):
            for dr, dc in _DIRECTIONS:
                end_r = r + dr * (length - 1)
                end_c = c + dc * (length - 1)
                if not (0 <= end_r < height and 0 <= end_c < len(grid[end_r])):
                    continue
                best = max(
                    best,
                    prod(grid[r + dr * k][c + dc * k] for k in range(length)),
                )
    return best


def problem011(length: int = 4) -> int:
    """Greatest product of ``length`` adjacent numbers in the 20x20 grid."""
    return max_grid_product(GRID_20, length)


def problem012(threshold: int = 500) -> int:
    """First triangle number with more than ``threshold`` divisors."""
    count = lru_cache(maxsize=None)(divisor_count)
    k = 1
    while True:
        # k and k + 1 are coprime, so split t(k) into two coprime factors.
        if k % 2 == 0:
            a, b = k // 2, k + 1
        else:
            a, b = k, (k + 1) // 2
        if count(a) * count(b) > threshold:
            return a * b
        k += 1


class CollatzCache:
    """Memoised Collatz sequence lengths for starting values below ``size``."""

    def __init__(self, size: int = 1_000_000) -> None:
        if size < 2:
            raise ValueError(f"size must be at least 2, got {size}")
        self._cache = [0] * size
        self._cache[1] = 1

    def length(self, n: int) -> int:
        """Number of terms in the Collatz sequence from ``n`` down to 1."""
        if n < 1:
            raise ValueError(f"n must be positive, got {n}")
        cache = self._cache
        size = len(cache)
        path = []
        while n >= size or cache[n] == 0:
            path.append(n)
            n = n // 2 if n % 2 == 0 else 3 * n + 1
        result = cache[n]
        for value in reversed(path):
            result += 1
            if value < size:
                cache[value] = result
        return result


def problem014(limit: int = 1_000_000) -> int:
    """Starting number below ``limit`` that produces the longest Collatz chain."""
    cache = CollatzCache(max(limit, 2))
    best, best_len = 1, 1
    for n in range(2, limit):
        current = cache.length(n)
        if current > best_len:
            best, best_len = n, current
    return best


def problem015(n: int = 20) -> int:
    """Number of monotone lattice paths through an ``n`` x ``n`` grid."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return comb(2 * n, n)


def problem016(exponent: int = 1000) -> int:
    """Sum of the decimal digits of 2 ** ``exponent``."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return sum(digits_of(2**exponent))


def _below_hundred(n: int) -> str:
    if n < 20:
        return _ONES[n]
    tens, ones = divmod(n, 10)
    return _TENS[tens] + (f"-{_ONES[ones]}" if ones else "")


def number_to_words(n: int) -> str:
    """British English words for ``n`` in 1..1000, e.g. 'one hundred and five'."""
    if not 1 <= n <= 1000:
        raise ValueError(f"n must be between 1 and 1000, got {n}")
    if n == 1000:
        return "one thousand"
    hundreds, rest = divmod(n, 100)
    parts = []
    if hundreds:
        parts.append(f"{_ONES[hundreds]} hundred")
    if rest:
        if hundreds:
            parts.append("and")
        parts.append(_below_hundred(rest))
    return " ".join(parts)


def problem017(limit: int = 1000) -> int:
    """Letters used writing out 1..``limit`` in words, ignoring spaces and hyphens."""
    return sum(
        sum(ch.isalpha() for ch in number_to_words(k)) for k in range(1, limit + 1)
    )


def max_path_sum(rows: Sequence[Sequence[int]]) -> int:
    """Maximum top-to-bottom path total through a number triangle."""
    if not rows:
        raise ValueError("triangle must have at least one row")
    for i, row in enumerate(rows):
        if len(row) != i + 1:
            raise ValueError(f"row {i} must have {i + 1} entries, got {len(row)}")
    best = list(rows[-1])
    for row in reversed(rows[:-1]):
        best = [
            value + max(left, right)
            for value, left, right in zip(row, best, best[1:])
        ]
    return best[0]


def problem018() -> int:
    """Maximum path total through the 15-row triangle."""
    return max_path_sum(PYRAMID_15)


def is_leap(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def problem019(century: int = 20) -> int:
    """Number of months in the given century that begin on a Sunday.

    Century 20 runs from 1901 to 2000 inclusive.
    """
    if not 1 <= century <= 100:
        raise ValueError(f"century must be between 1 and 100, got {century}")
    first = (century - 1) * 100 + 1
    last = century * 100
    return sum(
        date(year, month, 1).weekday() == 6
        for year in range(first, last + 1)
        for month in range(1, 13)
    )


def problem020(n: int = 100) -> int:
    """Sum of the decimal digits of ``n``!."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return sum(digits_of(factorial(n)))
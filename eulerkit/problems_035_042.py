"""Solutions to problems 35 to 42."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Iterator
from itertools import compress, permutations, product
from math import isqrt, prod
from pathlib import Path

from eulerkit.numtheory import is_prime, prime_sieve
from eulerkit.problems_024_034 import is_pandigital

# Only eleven primes are truncatable from both ends (2, 3, 5 and 7 excluded).
_TRUNCATABLE_PRIME_COUNT = 11

# Digit choices for truncatable-prime candidates, largest first.
_HEAD_DIGITS = (7, 5, 3, 2)
_MID_DIGITS = (9, 7, 3, 1)
_TAIL_DIGITS = (7, 3)

_UPPERCASE_RUN = re.compile(r"[A-Z]+")


def rotations(n: int) -> list[int]:
    """Return the digit rotations of ``n``, starting with ``n`` itself.

    Rotations that begin with a zero lose it, e.g. 3051 yields 513.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    text = str(n)
    return [int(text[i:] + text[:i]) for i in range(len(text))]


def problem035(limit: int = 1_000_000) -> int:
    """Number of circular primes below ``limit``."""
    sieve = prime_sieve(limit)

    def prime(k: int) -> bool:
        return bool(sieve[k]) if k < limit else is_prime(k)

    count = 0
    for p in compress(range(max(limit, 0)), sieve):
        # Any other digit ends up in the units place of some rotation.
        if p >= 10 and not set(str(p)) <= set("1379"):
            continue
        if all(prime(r) for r in rotations(p)):
            count += 1
    return count


def problem036(limit: int = 1_000_000) -> int:
    """Sum of numbers below ``limit`` palindromic in both base 10 and base 2."""
    total = 0
    for x in range(1, limit):
        decimal = str(x)
        if decimal != decimal[::-1]:
            continue
        binary = format(x, "b")
        if binary == binary[::-1]:
            total += x
    return total


def _is_left_truncatable(n: int) -> bool:
    power10 = 10
    while power10 <= n:
        power10 *= 10
    while n > 0:
        power10 //= 10
        if not is_prime(n):
            return False
        n %= power10
    return True


def _is_right_truncatable(n: int) -> bool:
    while n > 0:
        if not is_prime(n):
            return False
        n //= 10
    return True


def is_truncatable_prime(n: int) -> bool:
    """True if ``n`` stays prime while digits are removed from either end.

    Single-digit primes pass this test too; problem 37 starts from 11.
    """
    return _is_left_truncatable(n) and _is_right_truncatable(n // 10)


def _check_count(count: int) -> None:
    if not 0 <= count <= _TRUNCATABLE_PRIME_COUNT:
        raise ValueError(
            f"count must be between 0 and {_TRUNCATABLE_PRIME_COUNT}, got {count}"
        )


def problem037(count: int = 11) -> int:
    """Sum of the first ``count`` two-sided truncatable primes, by scanning odd numbers."""
    _check_count(count)
    total = 0
    found = 0
    target = 11
    while found < count:
        if is_truncatable_prime(target):
            total += target
            found += 1
        target += 2
    return total


def truncatable_candidates(num_digits: int) -> Iterator[int]:
    """Yield, in descending order, the ``num_digits``-digit truncatable-prime candidates.

    The leading digit is 2, 3, 5 or 7, the inner digits 1, 3, 7 or 9 and the
    last digit 3 or 7.
    """
    if num_digits < 2:
        raise ValueError(f"num_digits must be at least 2, got {num_digits}")
    for digits in product(
        _HEAD_DIGITS, *([_MID_DIGITS] * (num_digits - 2)), _TAIL_DIGITS
    ):
        yield int("".join(map(str, digits)))


def problem037_by_construction(count: int = 11) -> int:
    """Sum of ``count`` two-sided truncatable primes, built digit by digit.

    Candidates are tried by length, largest first within each length.
    """
    _check_count(count)
    total = 0
    found = 0
    num_digits = 2
    while found < count:
        for candidate in truncatable_candidates(num_digits):
            if found == count:
                break
            if is_truncatable_prime(candidate):
                total += candidate
                found += 1
        num_digits += 1
    return total


def concat(a: int, b: int) -> int:
    """Concatenate the decimal digits of ``a`` and ``b``: concat(12, 345) == 12345."""
    if b < 0:
        raise ValueError(f"b must be non-negative, got {b}")
    power10 = 10
    while power10 <= b:
        power10 *= 10
    return a * power10 + b


def problem038() -> int:
    """Largest 1-9 pandigital concatenated product of an integer with (1, 2, ..., n)."""
    # 9 concatenated with (1, 2, 3, 4, 5).
    best = 918273645
    for right in range(1, 1000):
        x = concat(9, right)
        candidate = x
        n = 2
        while True:
            candidate = concat(candidate, x * n)
            if len(str(candidate)) >= 9:
                break
            n += 1
        if candidate > best and is_pandigital(candidate):
            best = candidate
    return best


def problem039(max_perimeter: int = 1000) -> int:
    """Perimeter p <= ``max_perimeter`` with the most integer right triangles.

    Ties go to the smaller perimeter; 0 means no perimeter has a solution.
    """
    counts: Counter[int] = Counter()
    for a in range(1, max_perimeter // 3 + 1):
        for b in range(a + 1, (max_perimeter - a) // 2 + 1):
            square = a * a + b * b
            c = isqrt(square)
            if c * c == square and a + b + c <= max_perimeter:
                counts[a + b + c] += 1
    best, best_count = 0, 0
    for perimeter in sorted(counts):
        if counts[perimeter] > best_count:
            best, best_count = perimeter, counts[perimeter]
    return best


def champernowne_digit(n: int) -> int:
    """The ``n``-th digit (from 1) of the fractional part of 0.123456789101112..."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    block_num = 1
    power10 = 1
    block_len = 9
    first_of_block = 1
    while first_of_block + block_len <= n:
        first_of_block += block_len
        block_num += 1
        power10 *= 10
        block_len = 9 * block_num * power10
    offset = n - first_of_block
    target = power10 + offset // block_num
    position = block_num - offset % block_num
    return target // 10 ** (position - 1) % 10


def problem040(exponents: Iterable[int] = range(7)) -> int:
    """Product of the Champernowne digits at positions 10**e for each e in ``exponents``."""
    return prod(champernowne_digit(10**e) for e in exponents)


def problem041() -> int:
    """Largest n-digit pandigital prime."""
    # Digit sums rule out every length except 4 and 7.
    for width in (7, 4):
        for digits in permutations(range(width, 0, -1)):
            candidate = int("".join(map(str, digits)))
            if is_prime(candidate):
                return candidate
    raise LookupError("no pandigital prime found")


def is_triangle(n: int) -> bool:
    """True if ``n`` is a triangle number k(k+1)/2 for some k >= 0."""
    if n < 0:
        return False
    radicand = 8 * n + 1
    root = isqrt(radicand)
    return root * root == radicand


def word_score(word: str) -> int:
    """Alphabetical value of an upper-case word: A=1, B=2, ..., Z=26."""
    return sum(ord(ch) - ord("A") + 1 for ch in word)


def read_words(text: str) -> list[str]:
    """Return the runs of consecutive upper-case ASCII letters in ``text``."""
    return _UPPERCASE_RUN.findall(text)


def problem042(path: str | Path) -> int:
    """Number of triangle words in the word file at ``path``."""
    text = Path(path).read_text(encoding="ascii")
    return sum(is_triangle(word_score(word)) for word in read_words(text))
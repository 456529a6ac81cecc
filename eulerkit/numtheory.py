"""Number-theory helpers: primes, divisors, figurate numbers and digits."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import compress
from math import isqrt


def prime_sieve(limit: int) -> bytearray:
    """Return a sieve of length ``limit`` where ``sieve[i]`` is 1 iff ``i`` is prime."""
    if limit <= 0:
        return bytearray()
    sieve = bytearray([1]) * limit
    sieve[0] = 0
    if limit > 1:
        sieve[1] = 0
    for i in range(2, isqrt(limit - 1) + 1):
        if sieve[i]:
            start = i * i
            sieve[start::i] = bytes(len(range(start, limit, i)))
    return sieve


def primes_below(limit: int) -> list[int]:
    """Return all primes strictly below ``limit`` in ascending order."""
    return list(compress(range(max(limit, 0)), prime_sieve(limit)))


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, by trial division."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    d = 3
    while d * d <= n:
        if n % d == 0:
            return False
        d += 2
    return True


def sum_of_proper_divisors(n: int) -> int:
    """Return the sum of the divisors of ``n`` smaller than ``n``; ``n`` must be > 1."""
    if n < 2:
        raise ValueError(f"n must be greater than 1, got {n}")
    total = 1
    d = 2
    while d * d < n:
        if n % d == 0:
            total += d + n // d
        d += 1
    if d * d == n:
        total += d
    return total


def divisor_count(n: int) -> int:
    """Return the number of positive divisors of a positive integer ``n``."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    count = 1
    d = 2
    while d * d <= n:
        exponent = 0
        while n % d == 0:
            n //= d
            exponent += 1
        count *= exponent + 1
        d += 1 if d == 2 else 2
    if n > 1:
        count *= 2
    return count


def pentagonal_number(n: int) -> int:
    """Return the ``n``-th pentagonal number, n(3n - 1)/2."""
    return n * (3 * n - 1) // 2


def hexagonal_number(n: int) -> int:
    """Return the ``n``-th hexagonal number, n(2n - 1)."""
    return n * (2 * n - 1)


def is_pentagonal(n: int) -> bool:
    """Return True if ``n`` is a positive pentagonal number (0 is not counted)."""
    if n <= 0:
        return False
    radicand = 1 + 24 * n
    root = isqrt(radicand)
    return root * root == radicand and (1 + root) % 6 == 0


def count_distinct_prime_factors(n: int) -> int:
    """Return how many distinct primes divide the positive integer ``n``."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    count = 0
    if n % 2 == 0:
        count += 1
        while n % 2 == 0:
            n //= 2
    d = 3
    while d * d <= n:
        if n % d == 0:
            count += 1
            while n % d == 0:
                n //= d
        d += 2
    if n > 1:
        count += 1
    return count


def digits_of(n: int, base: int = 10) -> list[int]:
    """Return the digits of ``n`` in ``base``, least significant first (0 gives [])."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    digits = []
    while n > 0:
        n, digit = divmod(n, base)
        digits.append(digit)
    return digits


def is_palindrome(seq: Sequence) -> bool:
    """Return True if ``seq`` reads the same forwards and backwards."""
    items = list(seq)
    return items == items[::-1]
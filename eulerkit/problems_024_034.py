"""Solutions to problems 24 to 34."""

from __future__ import annotations

from collections.abc import Sequence
from fractions import Fraction
from functools import lru_cache
from itertools import combinations_with_replacement
from math import factorial

from eulerkit.numtheory import is_prime

_cached_is_prime = lru_cache(maxsize=None)(is_prime)

UK_COINS = (1, 2, 5, 10, 20, 50, 100, 200)


def nth_permutation(length: int, order: int) -> list[int]:
    """Return the permutation of ``0..length-1`` at lexicographic position ``order``.

    Positions count from 0; ``order`` is taken modulo ``length!``.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if order < 0:
        raise ValueError(f"order must be non-negative, got {order}")
    order %= factorial(length)
    remaining = list(range(length))
    result = []
    for size in range(length, 0, -1):
        index, order = divmod(order, factorial(size - 1))
        result.append(remaining.pop(index))
    return result


def problem024(target: int = 1_000_000, length: int = 10) -> str:
    """The ``target``-th lexicographic permutation of the digits ``0..length-1``."""
    if target < 1:
        raise ValueError(f"target must be positive, got {target}")
    return "".join(str(d) for d in nth_permutation(length, target - 1))


def problem025(digits: int = 1000) -> int:
    """Index of the first Fibonacci term (counting from index 2) with ``digits`` digits."""
    if digits < 1:
        raise ValueError(f"digits must be positive, got {digits}")
    threshold = 10 ** (digits - 1)
    prev, curr = 1, 1
    index = 2
    while curr < threshold:
        prev, curr = curr, prev + curr
        index += 1
    return index


def cycle_length(n: int) -> int:
    """Length of the recurring cycle in the decimal expansion of 1/``n``.

    Terminating expansions count as a cycle of one repeated zero.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    seen = {1: 1}
    remainder = 1
    position = 1
    while True:
        remainder = remainder * 10 % n
        position += 1
        if remainder in seen:
            return position - seen[remainder]
        seen[remainder] = position


def problem026(limit: int = 1000) -> int:
    """The d below ``limit`` for which 1/d has the longest recurring cycle."""
    best, best_len = 1, 1
    for d in range(2, limit):
        length = cycle_length(d)
        if length > best_len:
            best, best_len = d, length
    return best


def problem027(limit: int = 1000) -> int:
    """Product ab of the quadratic n^2 + an + b giving the most primes from n = 0.

    ``a`` ranges over ``-limit < a < limit`` and ``b`` over ``-limit <= b <= limit``.
    """
    best: tuple[int, int] | None = None
    max_len = 0
    for b in range(-limit, limit + 1):
        abs_b = abs(b)
        if not _cached_is_prime(abs_b):
            continue
        for a in range(-limit + 1, limit):
            n = 1
            while n <= abs_b and _cached_is_prime(abs(n * n + a * n + b)):
                n += 1
            if n > max_len:
                best = (a, b)
                max_len = n
    if best is None:
        raise ValueError(f"no prime coefficient b exists for limit {limit}")
    return best[0] * best[1]


def problem028(size: int = 1001) -> int:
    """Sum of the diagonals of a ``size`` x ``size`` number spiral."""
    if size < 1:
        raise ValueError(f"size must be positive, got {size}")
    n = size // 2
    return (16 * n**3 + 30 * n**2 + 26 * n + 3) // 3


def problem029(limit: int = 100) -> int:
    """Count of distinct terms a**b for 2 <= a, b <= ``limit``."""
    return len({a**b for a in range(2, limit + 1) for b in range(2, limit + 1)})


def problem030(power: int = 5, limit: int = 1_000_000) -> int:
    """Sum of numbers in ``2..limit-1`` equal to the sum of ``power``-th powers of their digits."""
    if power < 1:
        raise ValueError(f"power must be positive, got {power}")
    if limit <= 2:
        return 0
    found = set()
    for width in range(1, len(str(limit - 1)) + 1):
        for combo in combinations_with_replacement("0123456789", width):
            total = sum(int(d) ** power for d in combo)
            if 2 <= total < limit and tuple(sorted(str(total))) == combo:
                found.add(total)
    return sum(found)


def problem031(target: int = 200, coins: Sequence[int] = UK_COINS) -> int:
    """Number of ways to make ``target`` from any number of the given ``coins``."""
    if target < 0:
        raise ValueError(f"target must be non-negative, got {target}")
    if any(coin < 1 for coin in coins):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            ways[amount] += ways[amount - coin]
    return ways[target]


def is_pandigital(*args: int) -> bool:
    """True if the digits of all ``args`` together use each of 1..9 exactly once."""
    return "".join(sorted("".join(str(n) for n in args))) == "123456789"


def _pandigital_products(a_range: range, b_range: range) -> set[int]:
    products = set()
    for a in a_range:
        for b in b_range:
            c = a * b
            if c >= 10_000:
                break
            if is_pandigital(a, b, c):
                products.add(c)
    return products


def problem032() -> int:
    """Sum of products whose multiplicand/multiplier/product identity is 1-9 pandigital."""
    products = _pandigital_products(range(1, 10), range(1000, 10_000))
    products |= _pandigital_products(range(10, 100), range(100, 1000))
    return sum(products)


def problem033() -> int:
    """Denominator, in lowest terms, of the product of the four curious fractions."""
    product = Fraction(1)
    for a in range(10, 100):
        a2, a1 = divmod(a, 10)
        if a1 == 0:
            continue
        for b in range(a + 1, 100):
            b2, b1 = divmod(b, 10)
            if b1 == 0:
                continue
            if (a1 == b2 and a * b1 == b * a2) or (a2 == b1 and a * b2 == b * a1):
                product *= Fraction(a, b)
    return product.denominator


def problem034() -> int:
    """Sum of all numbers of two or more digits equal to the sum of their digit factorials."""
    digit_factorials = {str(d): factorial(d) for d in range(10)}
    found = set()
    for width in range(2, 8):
        for combo in combinations_with_replacement("0123456789", width):
            total = sum(digit_factorials[d] for d in combo)
            if total >= 10 and tuple(sorted(str(total))) == combo:
                found.add(total)
    return sum(found)
"""Solutions to problems 43 to 50."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import combinations, compress
from math import isqrt

from eulerkit.numtheory import (
    hexagonal_number,
    is_pentagonal,
    is_prime,
    pentagonal_number,
    prime_sieve,
    primes_below,
)

_SUBSTRING_PRIMES = (2, 3, 5, 7, 11, 13, 17)
_DIGITS = "0123456789"

# The sequence given in the problem statement, which must be skipped.
_KNOWN_SEQUENCE = (1487, 4817, 8147)


def _substring_divisible(primes: Sequence[int]) -> Iterator[int]:
    """Yield the 0-9 pandigitals whose 3-digit windows from position 2 divide by ``primes``."""

    def walk(prefix: str, unused: str) -> Iterator[int]:
        if not unused:
            yield int(prefix)
            return
        for digit in unused:
            if not prefix and digit == "0":
                continue
            candidate = prefix + digit
            # The window for primes[k] ends at index k + 3.
            k = len(candidate) - 4
            if 0 <= k < len(primes) and int(candidate[-3:]) % primes[k]:
                continue
            yield from walk(candidate, unused.replace(digit, ""))

    return walk("", _DIGITS)


def problem043(primes: Sequence[int] = _SUBSTRING_PRIMES) -> int:
    """Sum of 0-9 pandigitals where d(i+2)d(i+3)d(i+4) is divisible by ``primes[i]``."""
    primes = tuple(primes)
    if len(primes) > len(_SUBSTRING_PRIMES):
        raise ValueError(
            f"at most {len(_SUBSTRING_PRIMES)} divisors fit, got {len(primes)}"
        )
    if any(p < 1 for p in primes):
        raise ValueError("divisors must be positive")
    return sum(_substring_divisible(primes))


def _divisors(n: int) -> set[int]:
    small = [d for d in range(1, isqrt(n) + 1) if n % d == 0]
    return set(small) | {n // d for d in small}


def problem044() -> int:
    """Smallest pentagonal difference D = p_i - p_j for which p_i + p_j is pentagonal.

    Pentagonal differences are tried in ascending order, so the first one
    found is minimal.
    """
    k = 1
    while True:
        difference = pentagonal_number(k)
        # 2D = (i - j)(3(i + j) - 1), and k and 3k - 1 are coprime.
        twice = k * (3 * k - 1)
        left, right = _divisors(k), _divisors(3 * k - 1)
        for a in sorted(x * y for x in left for y in right):
            q = twice // a
            if q % 3 != 2:
                continue
            b = (q + 1) // 3
            if b <= a or (a + b) % 2:
                continue
            i, j = (a + b) // 2, (b - a) // 2
            if is_pentagonal(pentagonal_number(i) + pentagonal_number(j)):
                return difference
        k += 1


def problem044_first_found() -> int:
    """Difference of the first pentagonal pair found with pentagonal sum and difference.

    Pairs are scanned by increasing p_i and then decreasing p_j; minimality is
    not checked.
    """
    earlier: list[int] = []
    seen: set[int] = set()
    i = 1
    while True:
        p_i = pentagonal_number(i)
        # Every difference is below p_i, so ``seen`` decides pentagonality.
        for p_j in reversed(earlier):
            difference = p_i - p_j
            if difference in seen and is_pentagonal(p_i + p_j):
                return difference
        earlier.append(p_i)
        seen.add(p_i)
        i += 1


def problem045(start: int = 144) -> int:
    """First hexagonal number h(n), n >= ``start``, that is also pentagonal.

    Every hexagonal number is triangular as well.
    """
    if start < 1:
        raise ValueError(f"start must be positive, got {start}")
    n = start
    while True:
        candidate = hexagonal_number(n)
        if is_pentagonal(candidate):
            return candidate
        n += 1


def is_goldbach_composite(n: int) -> bool:
    """True if ``n`` is a prime plus twice a positive square."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    i = 1
    while True:
        twice_square = 2 * i * i
        if twice_square >= n:
            return False
        if is_prime(n - twice_square):
            return True
        i += 1


def problem046() -> int:
    """Smallest odd composite that is not a prime plus twice a square."""
    n = 9
    while True:
        if not is_prime(n) and not is_goldbach_composite(n):
            return n
        n += 2


def _omega_table(limit: int) -> list[int]:
    omega = [0] * limit
    for p in range(2, limit):
        if omega[p] == 0:
            for multiple in range(p, limit, p):
                omega[multiple] += 1
    return omega


def problem047(factors: int = 4, count: int = 4) -> int:
    """First of ``count`` consecutive integers each with ``factors`` distinct prime factors."""
    if factors < 1:
        raise ValueError(f"factors must be positive, got {factors}")
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")
    run = 0
    n = 1
    limit = 1024
    while True:
        omega = _omega_table(limit)
        while n < limit:
            if omega[n] == factors:
                run += 1
                if run == count:
                    return n - count + 1
            else:
                run = 0
            n += 1
        limit *= 2


def problem048(limit: int = 1000, digits: int = 10) -> str:
    """Last ``digits`` digits, zero-padded, of 1^1 + 2^2 + ... + limit^limit."""
    if digits < 1:
        raise ValueError(f"digits must be positive, got {digits}")
    modulus = 10**digits
    total = sum(pow(i, i, modulus) for i in range(1, limit + 1)) % modulus
    return f"{total:0{digits}d}"


def problem049() -> str:
    """Concatenation of the other 4-digit arithmetic sequence of prime permutations."""
    groups: dict[str, list[int]] = {}
    for p in primes_below(10_000):
        if p >= 1000:
            groups.setdefault("".join(sorted(str(p))), []).append(p)
    for members in groups.values():
        for first, second, third in combinations(members, 3):
            if third - second != second - first:
                continue
            if (first, second, third) == _KNOWN_SEQUENCE:
                continue
            return f"{first}{second}{third}"
    raise LookupError("no other sequence of prime permutations found")


def problem050(limit: int = 1_000_000) -> int:
    """Prime below ``limit`` that is the sum of the most consecutive primes."""
    if limit <= 2:
        raise ValueError(f"limit must be greater than 2, got {limit}")
    sieve = prime_sieve(limit)
    primes = [0, *compress(range(limit), sieve)]
    num_primes = len(primes) - 1
    result = 2
    window_sum = 0
    first = last = 1
    while last <= num_primes:
        # window_sum is primes[first] + ... + primes[last].
        window_sum += primes[last] - primes[first - 1]
        if window_sum >= limit:
            break
        trial = window_sum
        for i in range(last + 1, num_primes + 1):
            trial += primes[i]
            if trial >= limit:
                break
            if sieve[trial]:
                result = window_sum = trial
                last = i
        first += 1
        last += 1
    return result
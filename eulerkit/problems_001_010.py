"""Solutions to problems 1 to 10."""

from __future__ import annotations

from itertools import product
from math import prod

from eulerkit.numtheory import is_palindrome, primes_below

SERIES_1000 = (
    "73167176531330624919225119674426574742355349194934"
    "96983520312774506326239578318016984801869478851843"
    "85861560789112949495459501737958331952853208805511"
    "12540698747158523863050715693290963295227443043557"
    "66896648950445244523161731856403098711121722383113"
    "62229893423380308135336276614282806444486645238749"
    "30358907296290491560440772390713810515859307960866"
    "70172427121883998797908792274921901699720888093776"
    "65727333001053367881220235421809751254540594752243"
    "52584907711670556013604839586446706324415722155397"
    "53697817977846174064955149290862569321978468622482"
    "83972241375657056057490261407972968652414535100474"
    "82166370484403199890008895243450658541227588666881"
    "16427171479924442928230863465674813919123162824586"
    "17866458359124566529476545682848912883142607690042"
    "24219022671055626321111109370544217506941658960408"
    "07198403850962455444362981230987879927244284909188"
    "84580156166097919133875499200524063689912560717606"
    "05886116467109405077541002256983155200055935729725"
    "71636269561882670428252483600823257530420752963450"
)


def sum_of_multiples(multiple: int, limit: int) -> int:
    """Return the sum of the positive multiples of ``multiple`` below ``limit``."""
    if limit <= 0 or multiple == 0:
        return 0
    multiple = abs(multiple)
    n = (limit - 1) // multiple
    return n * (n + 1) // 2 * multiple


def problem001(limit: int = 1000) -> int:
    """Sum of all multiples of 3 or 5 below ``limit``."""
    return (
        sum_of_multiples(3, limit)
        + sum_of_multiples(5, limit)
        - sum_of_multiples(15, limit)
    )


def problem002(limit: int = 4_000_000) -> int:
    """Sum of the even Fibonacci terms (1, 2, 3, 5, ...) not exceeding ``limit``."""
    prev, curr = 1, 2
    total = 0
    while curr <= limit:
        if curr % 2 == 0:
            total += curr
        prev, curr = curr, curr + prev
    return total


def largest_prime_factor(n: int) -> int:
    """Return the largest prime factor of ``n`` (which must be at least 2)."""
    if n < 2:
        raise ValueError(f"n must be at least 2, got {n}")
    largest = 1
    while n % 2 == 0:
        largest = 2
        n //= 2
    factor = 3
    while factor * factor <= n:
        if n % factor == 0:
            largest = factor
            while n % factor == 0:
                n //= factor
        factor += 2
    return max(largest, n)


def problem003(n: int = 600851475143) -> int:
    """Largest prime factor of ``n``."""
    return largest_prime_factor(n)


def problem004(low: int = 100, high: int = 1000) -> int:
    """Largest palindrome that is a product of two factors in ``range(low, high)``."""
    return max(
        (
            x * y
            for x, y in product(range(low, high), repeat=2)
            if is_palindrome(str(x * y))
        ),
        default=0,
    )


def smallest_multiple(limit: int) -> int:
    """Return the smallest positive number divisible by every integer 1..``limit``."""
    result = 1
    for p in primes_below(limit + 1):
        power = p
        while power * p <= limit:
            power *= p
        result *= power
    return result


def problem005(limit: int = 20) -> int:
    """Smallest number evenly divisible by all of 1..``limit``."""
    return smallest_multiple(limit)


def problem006(n: int = 100) -> int:
    """Square of the sum of 1..n minus the sum of the squares of 1..n."""
    return n * (n + 1) * (n - 1) * (3 * n + 2) // 12


def nth_prime(n: int) -> int:
    """Return the ``n``-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    primes = [2]
    candidate = 3
    while len(primes) < n:
        if all(candidate % p for p in primes if p * p <= candidate):
            primes.append(candidate)
        candidate += 2
    return primes[n - 1]


def problem007(n: int = 10001) -> int:
    """The ``n``-th prime number."""
    return nth_prime(n)


def largest_series_product(digits: str, length: int) -> int:
    """Return the greatest product of ``length`` adjacent digits in ``digits``."""
    if length < 1 or length > len(digits):
        raise ValueError(
            f"length must be between 1 and {len(digits)}, got {length}"
        )
    values = [int(ch) for ch in digits]
    return max(
        prod(values[start:start + length])
        for start in range(len(values) - length + 1)
    )


def problem008(length: int = 13) -> int:
    """Greatest product of ``length`` adjacent digits of the 1000-digit series."""
    return largest_series_product(SERIES_1000, length)


def problem009(perimeter: int = 1000) -> int | None:
    """Product abc of the first Pythagorean triplet with a + b + c == ``perimeter``.

    Returns None when no such triplet exists.
    """
    for a in range(1, (perimeter - 3) // 3 + 1):
        for b in range(a + 1, (perimeter - 1 - a) // 2 + 1):
            c = perimeter - a - b
            if a * a + b * b == c * c:
                return a * b * c
    return None


def problem010(limit: int = 2_000_000) -> int:
    """Sum of all primes below ``limit``."""
    return sum(primes_below(limit))
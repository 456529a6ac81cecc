"""Solutions to problems 21 to 23."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from eulerkit.numtheory import sum_of_proper_divisors


@lru_cache(maxsize=None)
def _divisor_sum(n: int) -> int:
    # 1 has no proper divisors other than itself by the convention used here.
    return 1 if n < 2 else sum_of_proper_divisors(n)


def problem021(limit: int = 10_000) -> int:
    """Sum of all amicable numbers below ``limit``."""
    total = 0
    for a in range(2, limit):
        b = _divisor_sum(a)
        if a != b and _divisor_sum(b) == a:
            total += a
    return total


def parse_names(text: str) -> list[str]:
    """Split a comma-separated list of double-quoted names into plain names."""
    names = []
    for field in text.split(","):
        name = field.replace('"', "").strip()
        if name:
            names.append(name)
    return names


def name_score(name: str) -> int:
    """Alphabetical value of an upper-case name: A=1, B=2, ..., Z=26."""
    return sum(ord(ch) - ord("A") + 1 for ch in name)


def total_name_score(names: list[str]) -> int:
    """Sum of each name's score times its 1-based position in sorted order."""
    return sum(
        position * name_score(name)
        for position, name in enumerate(sorted(names), start=1)
    )


def problem022(path: str | Path) -> int:
    """Total of all name scores in the names file at ``path``."""
    text = Path(path).read_text(encoding="ascii")
    return total_name_score(parse_names(text))


def is_abundant(n: int) -> bool:
    """Return True if the sum of the proper divisors of ``n`` exceeds ``n``."""
    if n < 2:
        return False
    return n < sum_of_proper_divisors(n)


def _divisor_sums(limit: int) -> list[int]:
    sums = [0] * limit
    for d in range(1, limit // 2 + 1):
        for multiple in range(2 * d, limit, d):
            sums[multiple] += d
    return sums


def problem023(limit: int = 28123) -> int:
    """Sum of all integers in 0..``limit`` not expressible as two abundant numbers."""
    if limit < 0:
        return 0
    sums = _divisor_sums(limit)
    abundant_flags = [n >= 2 and n < s for n, s in enumerate(sums)]
    abundant = [n for n, flag in enumerate(abundant_flags) if flag]
    expressible = bytearray(limit + 1)
    for i, a in enumerate(abundant):
        if 2 * a > limit:
            break
        for b in abundant[i:]:
            total = a + b
            if total > limit:
                break
            expressible[total] = 1
    return sum(n for n in range(limit + 1) if not expressible[n])
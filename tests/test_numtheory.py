import pytest

from eulerkit.numtheory import (
    count_distinct_prime_factors,
    digits_of,
    divisor_count,
    hexagonal_number,
    is_palindrome,
    is_pentagonal,
    is_prime,
    pentagonal_number,
    prime_sieve,
    primes_below,
    sum_of_proper_divisors,
)


def test_sieve_agrees_with_trial_division():
    sieve = prime_sieve(500)
    assert len(sieve) == 500
    assert [bool(flag) for flag in sieve] == [is_prime(k) for k in range(500)]


@pytest.mark.parametrize("limit", [0, -5])
def test_sieve_empty_for_non_positive(limit):
    assert len(prime_sieve(limit)) == 0
    assert primes_below(limit) == []


def test_sieve_of_length_one_and_two():
    assert list(prime_sieve(1)) == [0]
    assert list(prime_sieve(2)) == [0, 0]


def test_primes_below_matches_is_prime():
    assert primes_below(1000) == [k for k in range(1000) if is_prime(k)]


def test_is_prime_rejects_small_and_negative():
    assert not is_prime(-7)
    assert not is_prime(0)
    assert not is_prime(1)
    assert is_prime(2)


def test_amicable_pair():
    assert sum_of_proper_divisors(220) == 284
    assert sum_of_proper_divisors(284) == 220


@pytest.mark.parametrize("n", range(2, 200))
def test_sum_of_proper_divisors_by_enumeration(n):
    assert sum_of_proper_divisors(n) == sum(d for d in range(1, n) if n % d == 0)


def test_sum_of_proper_divisors_rejects_one():
    with pytest.raises(ValueError):
        sum_of_proper_divisors(1)


@pytest.mark.parametrize("n", range(1, 300))
def test_divisor_count_by_enumeration(n):
    assert divisor_count(n) == sum(1 for d in range(1, n + 1) if n % d == 0)


def test_divisor_count_of_highly_divisible_triangle():
    assert divisor_count(76576500) > 500


def test_divisor_count_rejects_zero():
    with pytest.raises(ValueError):
        divisor_count(0)


def test_pentagonal_numbers_from_known_pair():
    assert pentagonal_number(2167) == 7042750
    assert pentagonal_number(1020) == 1560090
    assert is_pentagonal(5482660)
    assert is_pentagonal(8602840)


def test_is_pentagonal_matches_generated_numbers():
    generated = {pentagonal_number(k) for k in range(1, 200)}
    upper = pentagonal_number(199)
    assert {k for k in range(-10, upper + 1) if is_pentagonal(k)} == generated


def test_zero_is_not_pentagonal():
    assert not is_pentagonal(0)


def test_hexagonal_number_shared_with_triangle_and_pentagon():
    assert hexagonal_number(143) == 40755
    assert is_pentagonal(hexagonal_number(143))


def test_four_consecutive_with_four_prime_factors():
    assert [count_distinct_prime_factors(n) for n in range(134043, 134047)] == [4, 4, 4, 4]


@pytest.mark.parametrize("p", [2, 3, 97, 7919])
def test_prime_powers_have_one_factor(p):
    assert count_distinct_prime_factors(p) == 1
    assert count_distinct_prime_factors(p**3) == 1


def test_count_distinct_prime_factors_of_one():
    assert count_distinct_prime_factors(1) == 0


@pytest.mark.parametrize("base", [2, 3, 10, 16])
@pytest.mark.parametrize("n", [1, 7, 255, 1000, 123456789])
def test_digits_round_trip(n, base):
    digits = digits_of(n, base)
    assert all(0 <= d < base for d in digits)
    assert digits[-1] != 0
    assert sum(d * base**i for i, d in enumerate(digits)) == n


def test_digits_of_zero():
    assert digits_of(0) == []


def test_digits_of_rejects_bad_base():
    with pytest.raises(ValueError):
        digits_of(10, 1)


def test_digits_of_rejects_negative():
    with pytest.raises(ValueError):
        digits_of(-1)


def test_is_palindrome():
    assert is_palindrome("abba")
    assert is_palindrome([1, 2, 1])
    assert is_palindrome([])
    assert not is_palindrome([1, 2])
    assert is_palindrome(digits_of(585, 10))
    assert is_palindrome(digits_of(585, 2))
from itertools import pairwise

import pytest

from eulerkit.problems_024_034 import (
    cycle_length,
    is_pandigital,
    nth_permutation,
    problem024,
    problem025,
    problem026,
    problem027,
    problem028,
    problem029,
    problem030,
    problem031,
    problem032,
    problem033,
    problem034,
)


@pytest.mark.parametrize(
    "order, expected",
    [(0, [0, 1, 2]), (1, [0, 2, 1]), (2, [1, 0, 2]), (6, [0, 1, 2])],
)
def test_nth_permutation_examples(order, expected):
    assert nth_permutation(3, order) == expected


def test_nth_permutation_enumerates_in_lexicographic_order():
    perms = [nth_permutation(4, k) for k in range(24)]
    assert perms == sorted(perms)
    assert len({tuple(p) for p in perms}) == 24
    assert all(sorted(p) == [0, 1, 2, 3] for p in perms)


def test_nth_permutation_rejects_negative_order():
    with pytest.raises(ValueError):
        nth_permutation(3, -1)


def test_problem024_default():
    assert problem024() == "2783915460"


def test_problem024_first_is_identity():
    assert problem024(1, 5) == "01234"


def test_problem025_default():
    assert problem025() == 4782


def test_problem025_is_monotone():
    values = [problem025(d) for d in range(1, 30)]
    assert all(a < b for a, b in pairwise(values))


def test_problem025_rejects_zero():
    with pytest.raises(ValueError):
        problem025(0)


def test_cycle_length_terminating_is_one():
    assert cycle_length(2) == 1
    assert cycle_length(8) == 1


def test_cycle_length_bounded_and_doubling_invariant():
    for n in range(2, 200):
        assert 1 <= cycle_length(n) < n
        assert cycle_length(2 * n) == cycle_length(n)


def test_cycle_length_rejects_zero():
    with pytest.raises(ValueError):
        cycle_length(0)


def test_problem026_default():
    assert problem026() == 983


def test_problem027_default():
    assert problem027() == -59231


def test_problem027_without_prime_b_raises():
    with pytest.raises(ValueError):
        problem027(1)


def test_problem028_matches_source_spiral():
    diagonal = [21, 7, 1, 3, 13, 17, 5, 9, 25]
    assert problem028(5) == sum(diagonal)
    assert problem028(1) == 1


def test_problem028_grows_with_size():
    assert problem028(1001) > problem028(999) > problem028(5)


def test_problem029_default():
    assert problem029() == 9183


def test_problem029_small_cases_are_all_distinct():
    assert problem029(3) == 4
    assert problem029(10) <= 81


def test_problem030_default():
    assert problem030() == 443839


def test_problem030_fourth_powers():
    assert problem030(4) == 19316


def test_problem030_rejects_zero_power():
    with pytest.raises(ValueError):
        problem030(0)


def test_problem031_default():
    assert problem031() == 73682


def test_problem031_invariants():
    assert problem031(0) == 1
    assert problem031(37, coins=(1,)) == 1
    for target in range(20):
        assert problem031(target, coins=(1, 2)) == target // 2 + 1


def test_problem031_rejects_negative_target():
    with pytest.raises(ValueError):
        problem031(-1)


def test_is_pandigital():
    assert is_pandigital(39, 186, 7254)
    assert is_pandigital(123456789)
    assert not is_pandigital(12345678, 8)
    assert not is_pandigital(12345678, 90)


def test_problem032():
    assert problem032() == 45228


def test_problem033():
    assert problem033() == 100


def test_problem034():
    assert problem034() == 40730
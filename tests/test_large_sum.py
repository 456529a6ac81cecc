import pytest

from eulerkit.large_sum import NUMBERS_100, leading_digits_of_sum, problem013


def test_problem013_default():
    assert problem013() == "5537376230"


def test_problem013_prefix_consistency():
    assert problem013(10).startswith(problem013(5))
    assert problem013(3) == problem013()[:3]


def test_carry_extends_length():
    assert leading_digits_of_sum([999, 1], 4) == "1000"


def test_accepts_strings_and_ints_alike():
    assert leading_digits_of_sum(["12", "30"], 2) == leading_digits_of_sum([12, 30], 2)


def test_prefix_invariant_over_counts():
    for k in range(1, 10):
        assert leading_digits_of_sum(NUMBERS_100, k + 1).startswith(
            leading_digits_of_sum(NUMBERS_100, k)
        )


@pytest.mark.parametrize("count", [0, -1])
def test_non_positive_count_rejected(count):
    with pytest.raises(ValueError):
        leading_digits_of_sum([1, 2], count)


def test_count_beyond_digits_rejected():
    with pytest.raises(ValueError):
        leading_digits_of_sum([5, 4], 2)
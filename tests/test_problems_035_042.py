import pytest

from eulerkit.numtheory import is_prime
from eulerkit.problems_035_042 import (
    champernowne_digit,
    concat,
    is_triangle,
    is_truncatable_prime,
    problem035,
    problem036,
    problem037,
    problem037_by_construction,
    problem038,
    problem039,
    problem040,
    problem041,
    problem042,
    read_words,
    rotations,
    truncatable_candidates,
    word_score,
)


def test_rotations_of_123():
    assert rotations(123) == [123, 231, 312]


def test_rotations_drop_leading_zero():
    assert 513 in rotations(3051)


def test_rotations_negative_raises():
    with pytest.raises(ValueError):
        rotations(-1)


def test_problem035_default():
    assert problem035() == 55


def test_problem035_below_hundred():
    assert problem035(100) == 13


def test_problem035_is_monotone():
    assert problem035(1000) >= problem035(100)


def test_problem036_default():
    assert problem036() == 872187


def test_problem036_nothing_below_one():
    assert problem036(1) == 0


def test_problem037_default():
    assert problem037() == 748317


def test_problem037_by_construction_default():
    assert problem037_by_construction() == 748317


def test_problem037_zero_count():
    assert problem037(0) == 0
    assert problem037_by_construction(0) == 0


@pytest.mark.parametrize("func", [problem037, problem037_by_construction])
def test_problem037_too_many_raises(func):
    with pytest.raises(ValueError):
        func(12)


def test_truncatable_prime_results_are_prime():
    for n in range(11, 1000, 2):
        if is_truncatable_prime(n):
            assert all(is_prime(r) for r in (n, n // 10, n % 10))


def test_non_prime_is_not_truncatable():
    assert not is_truncatable_prime(21)


def test_truncatable_candidates_descending_and_counted():
    candidates = list(truncatable_candidates(3))
    assert len(candidates) == 4 * 4 * 2
    assert candidates == sorted(candidates, reverse=True)
    assert all(100 <= c < 1000 for c in candidates)


def test_truncatable_candidates_too_short_raises():
    with pytest.raises(ValueError):
        list(truncatable_candidates(1))


def test_concat_examples():
    assert concat(12, 345) == 12345
    assert concat(1000, 0) == 10000


def test_problem038_default():
    assert problem038() == 932718654


def test_problem039_default():
    assert problem039() == 840


def test_problem039_no_triangles():
    assert problem039(5) == 0


def test_champernowne_digits_match_expansion():
    expansion = "123456789101112131415"
    for position, expected in enumerate(expansion, start=1):
        assert champernowne_digit(position) == int(expected)


def test_champernowne_digit_rejects_zero():
    with pytest.raises(ValueError):
        champernowne_digit(0)


def test_problem040_default():
    assert problem040() == 210


def test_problem040_empty_product():
    assert problem040([]) == 1


def test_problem041():
    result = problem041()
    assert result == 7652413
    assert is_prime(result)


def test_is_triangle_on_triangle_numbers():
    for k in range(50):
        assert is_triangle(k * (k + 1) // 2)


def test_is_triangle_rejects_between():
    for k in range(2, 50):
        assert not is_triangle(k * (k + 1) // 2 + 1)
    assert not is_triangle(-3)


def test_word_score_letters():
    assert word_score("A") == 1
    assert word_score("Z") == 26
    assert word_score("") == 0


def test_read_words_from_quoted_list():
    assert read_words('"A","ABILITY","ABLE"') == ["A", "ABILITY", "ABLE"]


def test_read_words_ignores_lowercase():
    assert read_words("abc DEF ghi") == ["DEF"]


def test_problem042_counts_triangle_words(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text('"A","B","C","J"', encoding="ascii")
    assert problem042(path) == 3


def test_problem042_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        problem042(tmp_path / "absent.txt")
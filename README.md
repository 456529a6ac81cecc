# eulerkit

Answers to Project Euler problems 1 to 50, together with the small
number-theory toolkit they are built on: prime sieves, primality tests,
divisor sums and counts, figurate numbers and digit helpers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Print the answer to one or more problems by number, one answer per line:

```
eulerkit 1
eulerkit 1 2 3
```

Problems 22 and 42 read a word list, which is given with `--data`:

```
eulerkit 22 --data names.txt
```

An unknown problem number, or problem 22 or 42 without `--data`, is
reported as a usage error.

## Library use

Each problem has a function named `problemNNN`. Where a problem takes
arguments, they default to the puzzle's own values, so other limits can be
tried as well:

```python
from eulerkit.problems_001_010 import problem001, sum_of_multiples
from eulerkit.numtheory import is_prime

problem001(1000)            # 233168
sum_of_multiples(3, 10)     # 3 + 6 + 9 = 18
is_prime(104743)            # True
```

The problems are spread over these modules:

- `eulerkit.problems_001_010`: problems 1-10, plus `largest_prime_factor`,
  `smallest_multiple`, `nth_prime` and `largest_series_product`
- `eulerkit.problems_011_020`: problems 11, 12 and 14-20, plus
  `max_grid_product`, `CollatzCache`, `number_to_words`, `max_path_sum`
  and `is_leap`
- `eulerkit.large_sum`: problem 13 and `leading_digits_of_sum`
- `eulerkit.problems_021_023`: problems 21-23, plus `parse_names`,
  `name_score`, `total_name_score` and `is_abundant`
- `eulerkit.problems_024_034`: problems 24-34, plus `nth_permutation`,
  `cycle_length` and `is_pandigital`
- `eulerkit.problems_035_042`: problems 35-42, plus `rotations`,
  `is_truncatable_prime`, `truncatable_candidates`,
  `problem037_by_construction`, `concat`, `champernowne_digit`,
  `is_triangle`, `word_score` and `read_words`
- `eulerkit.problems_043_050`: problems 43-50, plus
  `problem044_first_found` and `is_goldbach_composite`

The helpers in `eulerkit.numtheory` cover the ground that many problems
share:

- `prime_sieve(limit)` and `primes_below(limit)`
- `is_prime(n)`
- `sum_of_proper_divisors(n)` and `divisor_count(n)`
- `pentagonal_number(n)`, `hexagonal_number(n)` and `is_pentagonal(n)`
- `count_distinct_prime_factors(n)`
- `digits_of(n, base)` and `is_palindrome(seq)`

`eulerkit.cli.solve(number)` returns the answer to one problem that needs
no data file, and `eulerkit.cli.main(argv)` is the command-line entry
point.

## What it does not do

The word lists for problems 22 and 42 are not included; pass the path of
your own copy to `problem022(path)` or `problem042(path)`, or to the
command with `--data`.
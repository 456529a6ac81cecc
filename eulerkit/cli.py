"""Command-line entry point that prints problem answers."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from pathlib import Path

from eulerkit.large_sum import problem013
from eulerkit.problems_001_010 import (
    problem001,
    problem002,
    problem003,
    problem004,
    problem005,
    problem006,
    problem007,
    problem008,
    problem009,
    problem010,
)
from eulerkit.problems_011_020 import (
    problem011,
    problem012,
    problem014,
    problem015,
    problem016,
    problem017,
    problem018,
    problem019,
    problem020,
)
from eulerkit.problems_021_023 import problem021, problem022, problem023
from eulerkit.problems_024_034 import (
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
from eulerkit.problems_035_042 import (
    problem035,
    problem036,
    problem037,
    problem038,
    problem039,
    problem040,
    problem041,
    problem042,
)
from eulerkit.problems_043_050 import (
    problem043,
    problem044,
    problem045,
    problem046,
    problem047,
    problem048,
    problem049,
    problem050,
)

_SOLVERS: dict[int, Callable[[], object]] = {
    1: problem001,
    2: problem002,
    3: problem003,
    4: problem004,
    5: problem005,
    6: problem006,
    7: problem007,
    8: problem008,
    9: problem009,
    10: problem010,
    11: problem011,
    12: problem012,
    13: problem013,
    14: problem014,
    15: problem015,
    16: problem016,
    17: problem017,
    18: problem018,
    19: problem019,
    20: problem020,
    21: problem021,
    23: problem023,
    24: problem024,
    25: problem025,
    26: problem026,
    27: problem027,
    28: problem028,
    29: problem029,
    30: problem030,
    31: problem031,
    32: problem032,
    33: problem033,
    34: problem034,
    35: problem035,
    36: problem036,
    37: problem037,
    38: problem038,
    39: problem039,
    40: problem040,
    41: problem041,
    43: problem043,
    44: problem044,
    45: problem045,
    46: problem046,
    47: problem047,
    48: problem048,
    49: problem049,
    50: problem050,
}

_FILE_SOLVERS: dict[int, Callable[[Path], object]] = {
    22: problem022,
    42: problem042,
}


def solve(number: int) -> object:
    """Return the answer to problem ``number`` using its default parameters.

    Problems that read a data file are not available here.
    """
    if number in _FILE_SOLVERS:
        raise ValueError(f"problem {number} needs a data file")
    try:
        solver = _SOLVERS[number]
    except KeyError:
        raise ValueError(f"no solution for problem {number}") from None
    return solver()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the answer to each requested problem, one per line."""
    parser = argparse.ArgumentParser(
        prog="eulerkit", description="Print answers to numbered problems."
    )
    parser.add_argument("numbers", nargs="+", type=int, help="problem numbers")
    parser.add_argument(
        "--data",
        type=Path,
        help="data file for problems that read one (22 and 42)",
    )
    args = parser.parse_args(argv)

    for number in args.numbers:
        if number in _FILE_SOLVERS:
            if args.data is None:
                parser.error(f"problem {number} needs --data")
            try:
                answer = _FILE_SOLVERS[number](args.data)
            except OSError as exc:
                parser.error(f"cannot read {args.data}: {exc}")
        else:
            try:
                answer = solve(number)
            except ValueError as exc:
                parser.error(str(exc))
        print(answer)
    return 0
"""Trebuchet calibration: recover two-digit values hidden in lines of text."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Iterable, Iterator, Mapping
from functools import partial
from pathlib import Path

_SPELLED_DIGITS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

_Solver = Callable[[list[str]], object]


def _solve_file(
    argv: list[str] | None,
    description: str,
    solvers: Mapping[int, tuple[str, _Solver]],
) -> int:
    """Read a puzzle input, print the chosen part's labelled answer and the time taken.

    ``solvers`` maps each part number to the label printed before its answer
    and the function that computes the answer from the input's lines.
    """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=sorted(solvers), default=min(solvers))
    args = parser.parse_args(argv)

    started = time.perf_counter()
    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Cannot open file!", file=sys.stderr)
        return 1

    label, solve = solvers[args.part]
    print(f"{label}: {solve(text.splitlines())}")
    elapsed = int((time.perf_counter() - started) * 1_000_000)
    print(f"Time taken by function: {elapsed} microseconds")
    return 0


def _digits(line: str, spelled: bool) -> Iterator[int]:
    """Yield the digits 1-9 found in ``line``, left to right.

    With ``spelled`` set, spelled-out digit names count as digits too; names
    may overlap, so every position of the line is examined.
    """
    for index, char in enumerate(line):
        if spelled:
            word_digit = next(
                (digit for word, digit in _SPELLED_DIGITS.items() if line.startswith(word, index)),
                None,
            )
            if word_digit is not None:
                yield word_digit
                continue
        if "1" <= char <= "9":
            yield int(char)


def calibration_value(line: str, spelled: bool = False) -> int:
    """Combine the first and last digit of ``line``; 0 when it has none."""
    digits = list(_digits(line, spelled))
    if not digits:
        return 0
    return digits[0] * 10 + digits[-1]


def sum_calibration(lines: Iterable[str], spelled: bool = False) -> int:
    """Sum the calibration values of all lines."""
    return sum(calibration_value(line, spelled) for line in lines)


def main(argv: list[str] | None = None) -> int:
    return _solve_file(
        argv,
        "Sum trebuchet calibration values.",
        {
            1: ("Sum", sum_calibration),
            2: ("Sum", partial(sum_calibration, spelled=True)),
        },
    )
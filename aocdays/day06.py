"""Boat races: count the button hold times that beat each record distance."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence

from aocdays.day01 import _solve_file

_DIGITS = re.compile(r"[0-9]+")
_FIRST_DIGIT = re.compile(r"[0-9]")


def _pair_halves(numbers: Sequence[int]) -> list[tuple[int, int]]:
    """Pair the first half of ``numbers`` (times) with the second (distances)."""
    half = len(numbers) // 2
    return list(zip(numbers[:half], numbers[half : 2 * half]))


def parse_races(lines: Iterable[str]) -> list[tuple[int, int]]:
    """Read every number of every line and pair times with record distances."""
    numbers = [int(match.group()) for line in lines for match in _DIGITS.finditer(line)]
    return _pair_halves(numbers)


def _joined_number(line: str) -> int:
    """Read one number from ``line``, ignoring the spaces between its digits."""
    first = _FIRST_DIGIT.search(line)
    if first is None:
        raise ValueError(f"no number in line: {line!r}")
    rest = line[first.start() :].replace(" ", "")
    leading = _DIGITS.match(rest)
    assert leading is not None
    return int(leading.group())


def parse_single_race(lines: Iterable[str]) -> list[tuple[int, int]]:
    """Read each line as one number with its spaces removed, then pair them."""
    return _pair_halves([_joined_number(line) for line in lines])


def ways_to_win(time: int, distance: int) -> int:
    """Count hold times from 1 to ``time`` that travel further than ``distance``."""
    if time <= 0:
        return 0

    def travelled(hold: int) -> int:
        return hold * (time - hold)

    middle = time // 2
    if travelled(middle) <= distance:
        return 0
    low, high = 0, middle
    while low < high:
        probe = (low + high) // 2
        if travelled(probe) > distance:
            high = probe
        else:
            low = probe + 1
    # Winning holds form the interval [low, time - low], clipped to start at 1.
    return (time - low) - max(low, 1) + 1


def product_of_ways(races: Iterable[tuple[int, int]]) -> int:
    """Multiply the number of ways to win each race."""
    return math.prod(ways_to_win(race_time, distance) for race_time, distance in races)


def main(argv: list[str] | None = None) -> int:
    return _solve_file(
        argv,
        "Count ways to win boat races.",
        {
            1: ("Results", lambda lines: product_of_ways(parse_races(lines))),
            2: ("Results", lambda lines: product_of_ways(parse_single_race(lines))),
        },
    )
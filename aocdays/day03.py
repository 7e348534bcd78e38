"""Gear ratios: find part numbers and gears in an engine schematic."""

from __future__ import annotations

import math
import re
from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence

from aocdays.day01 import _solve_file

_NUMBER = re.compile(r"[0-9]+")
_GEAR = "*"


def _is_symbol(char: str) -> bool:
    return char != "." and not ("0" <= char <= "9")


def _numbers(grid: Sequence[str]) -> Iterator[tuple[int, int, int, int]]:
    """Yield ``(value, row, start, end)`` for every number in the grid."""
    for row, line in enumerate(grid):
        for match in _NUMBER.finditer(line):
            yield int(match.group()), row, match.start(), match.end()


def _surroundings(
    grid: Sequence[str], row: int, start: int, end: int
) -> Iterator[tuple[int, int, str]]:
    """Yield ``(row, column, char)`` for the cells bordering a number."""
    for r in range(max(row - 1, 0), min(row + 2, len(grid))):
        line = grid[r]
        for c in range(max(start - 1, 0), min(end + 1, len(line))):
            if r == row and start <= c < end:
                continue
            yield r, c, line[c]


def part_numbers_sum(lines: Iterable[str]) -> int:
    """Sum the numbers that touch a symbol, diagonals included."""
    grid = list(lines)
    return sum(
        value
        for value, row, start, end in _numbers(grid)
        if any(_is_symbol(char) for _, _, char in _surroundings(grid, row, start, end))
    )


def gear_ratios_sum(lines: Iterable[str]) -> int:
    """Sum the products of number pairs sharing a ``*`` touched by exactly two numbers."""
    grid = list(lines)
    gears: defaultdict[tuple[int, int], list[int]] = defaultdict(list)
    for value, row, start, end in _numbers(grid):
        for r, c, char in _surroundings(grid, row, start, end):
            if char == _GEAR:
                gears[r, c].append(value)
    return sum(math.prod(parts) for parts in gears.values() if len(parts) == 2)


def main(argv: list[str] | None = None) -> int:
    label = "Sum of all of the part numbers"
    return _solve_file(
        argv,
        "Analyse an engine schematic.",
        {1: (label, part_numbers_sum), 2: (label, gear_ratios_sum)},
    )
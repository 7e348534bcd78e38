"""Mirage maintenance: extrapolate sequences through repeated differences."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from functools import reduce
from pathlib import Path


def _differences(values: Sequence[int]) -> list[int]:
    return [later - earlier for earlier, later in zip(values, values[1:])]


def _levels(values: Sequence[int]) -> Iterator[list[int]]:
    """Yield the sequence and its difference rows while a row holds two or more values."""
    level = list(values)
    while len(level) > 1:
        yield level
        level = _differences(level)


def extrapolate_next(values: Sequence[int]) -> int:
    """Predict the value following ``values``."""
    return sum(level[-1] for level in _levels(values))


def extrapolate_previous(values: Sequence[int]) -> int:
    """Predict the value preceding ``values``."""
    firsts: list[int] = []
    for level in _levels(values):
        if not any(level):
            break
        firsts.append(level[0])
    return reduce(lambda below, first: first - below, reversed(firsts), 0)


def _parse_numbers(line: str) -> list[int]:
    """Read the leading run of integers on a line, stopping at the first other token."""
    numbers: list[int] = []
    for token in line.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def sum_next(lines: Iterable[str]) -> int:
    """Sum the next values of every line's sequence."""
    return sum(extrapolate_next(_parse_numbers(line)) for line in lines)


def sum_previous(lines: Iterable[str]) -> int:
    """Sum the previous values of every line's sequence."""
    return sum(extrapolate_previous(_parse_numbers(line)) for line in lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Extrapolate sensor histories.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    started = time.perf_counter()
    try:
        lines = Path(args.path).read_text().splitlines()
    except OSError:
        print("Cannot open file!", file=sys.stderr)
        return 1

    result = sum_next(lines) if args.part == 1 else sum_previous(lines)
    print(f"Results: {result}")
    elapsed = int((time.perf_counter() - started) * 1_000_000)
    print(f"Time taken by function: {elapsed} microseconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
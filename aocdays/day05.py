"""Seed almanac: map seeds through a chain of range mappings to locations."""

from __future__ import annotations

import argparse
import sys
import time
from bisect import bisect_right
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from functools import reduce
from itertools import groupby
from pathlib import Path

_SECTIONS = 8  # seeds followed by seven maps


@dataclass(frozen=True)
class Mapping:
    """Values from ``input_offset`` on, ``size`` of them, move to ``output_offset``."""

    input_offset: int
    output_offset: int
    size: int


@dataclass(frozen=True)
class SeedRange:
    """A run of ``size`` consecutive values starting at ``start``."""

    start: int
    size: int


@dataclass(frozen=True)
class Almanac:
    """Seed ranges and the seven maps that lead from seed to location."""

    seeds: tuple[SeedRange, ...]
    maps: tuple[tuple[Mapping, ...], ...]

    def all_seed_locations(self) -> list[SeedRange]:
        """Location ranges of all seed ranges, sorted by start."""
        return reduce(convert_ranges, self.maps, list(self.seeds))


def _by_start(seed_range: SeedRange) -> int:
    return seed_range.start


def _by_input(mapping: Mapping) -> int:
    return mapping.input_offset


def _apply(value: int, triples: Sequence[tuple[int, int, int]]) -> int:
    # The upper bound is inclusive: a value at source + size is still mapped.
    for dest, source, size in triples:
        if source <= value <= source + size:
            return dest - source + value
    return value


def lowest_location(lines: Iterable[str]) -> int:
    """Lowest location reached by the individual seeds on the first line."""
    it = iter(lines)
    first = next(it, None)
    if first is None:
        raise ValueError("empty almanac")
    seeds = [int(value) for value in first[7:].split()]
    next(it, None)

    for line in it:
        if not ("a" < line[:1] < "z"):
            continue
        numbers: list[int] = []
        for row in it:
            if not ("0" <= row[:1] <= "9"):
                break
            numbers.extend(int(value) for value in row.split())
        triples = list(zip(numbers[0::3], numbers[1::3], numbers[2::3]))
        seeds = [_apply(seed, triples) for seed in seeds]

    if not seeds:
        raise ValueError("almanac lists no seeds")
    return min(seeds)


def convert_ranges(
    ranges: Iterable[SeedRange], mappings: Iterable[Mapping]
) -> list[SeedRange]:
    """Send value ranges through one map, splitting them where mappings begin or end."""
    pending = sorted(ranges, key=_by_start)
    ordered = sorted(mappings, key=_by_input)
    if not pending:
        return []

    index = bisect_right([m.input_offset for m in ordered], pending[0].start)
    if index:
        index -= 1

    output: list[SeedRange] = []
    for seed_range in pending:
        start, size = seed_range.start, seed_range.size
        while size > 0:
            if index == len(ordered):
                output.append(SeedRange(start, size))
                break
            mapping = ordered[index]
            if start < mapping.input_offset:
                actual = min(size, mapping.input_offset - start)
                output.append(SeedRange(start, actual))
            elif start - mapping.input_offset >= mapping.size:
                index += 1
                continue
            else:
                actual = min(mapping.input_offset + mapping.size - start, size)
                output.append(
                    SeedRange(start - mapping.input_offset + mapping.output_offset, actual)
                )
            start += actual
            size -= actual

    output.sort(key=_by_start)
    return output


def _is_number(token: str) -> bool:
    return token.isascii() and token.isdigit()


def _chunks(values: list[int], n: int) -> Iterator[tuple[int, ...]]:
    return zip(*[iter(values)] * n)


def parse_almanac(text: str) -> Almanac:
    """Parse an almanac whose seeds line holds start/length pairs."""
    tokens = text.split()[1:]
    blocks = [
        [int(token) for token in group]
        for numeric, group in groupby(tokens, key=_is_number)
        if numeric
    ]
    if len(blocks) < _SECTIONS:
        raise ValueError(
            f"expected {_SECTIONS} numeric sections, found {len(blocks)}"
        )
    seeds = tuple(
        sorted((SeedRange(start, size) for start, size in _chunks(blocks[0], 2)), key=_by_start)
    )
    maps = tuple(
        tuple(
            sorted(
                (
                    Mapping(input_offset=source, output_offset=dest, size=size)
                    for dest, source, size in _chunks(block, 3)
                ),
                key=_by_input,
            )
        )
        for block in blocks[1:_SECTIONS]
    )
    return Almanac(seeds, maps)


def closest_range_location(text: str) -> int:
    """Lowest location reached by any seed in the almanac's seed ranges."""
    locations = parse_almanac(text).all_seed_locations()
    if not locations:
        raise ValueError("almanac lists no seed ranges")
    return locations[0].start


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the lowest seed location.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    started = time.perf_counter()
    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Cannot open file!", file=sys.stderr)
        return 1

    if args.part == 1:
        result = lowest_location(text.splitlines())
    else:
        result = closest_range_location(text)
    print(f"Lowest location number: {result}")
    elapsed = int((time.perf_counter() - started) * 1_000_000)
    print(f"Time taken by function: {elapsed} microseconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
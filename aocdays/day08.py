"""Haunted wasteland: follow left/right instructions through a network of nodes."""

from __future__ import annotations

import argparse
import math
import sys
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import cycle
from pathlib import Path


class PathError(Exception):
    """Raised when a walk through the network cannot reach its goal."""


@dataclass
class Network:
    """Instructions and the left/right successors of each node."""

    instructions: str
    edges: dict[str, tuple[str, str]] = field(default_factory=dict)

    def add_node(self, parent: str, left: str, right: str) -> None:
        """Record the left and right successors of ``parent``."""
        self.edges[parent] = (left, right)

    def _known(self) -> set[str]:
        known = set(self.edges)
        for left, right in self.edges.values():
            known.update((left, right))
        return known

    def _directions(self) -> Iterator[tuple[int, str]]:
        if not self.instructions:
            raise ValueError("no instructions to follow")
        return cycle(enumerate(self.instructions))

    def steps(self, start: str = "AAA", target: str = "ZZZ") -> int:
        """Count the moves from ``start`` until ``target`` is reached."""
        if start not in self._known():
            raise PathError(f"start node {start!r} not found")
        directions = self._directions()
        if start == target:
            return 0
        current = start
        seen: set[tuple[str, int]] = set()
        for count, (index, direction) in enumerate(directions, start=1):
            state = (current, index)
            if state in seen:
                raise PathError(f"target node {target!r} cannot be reached")
            seen.add(state)
            if current not in self.edges:
                raise PathError(f"reached node {current!r} with no way onward")
            left, right = self.edges[current]
            current = left if direction in "Ll" else right
            if current == target:
                return count
        raise AssertionError("unreachable")

    def _ghost_walk(self, start: str, directions: Iterator[tuple[int, str]]) -> int:
        current = start
        seen: set[tuple[str, int]] = set()
        for count, (index, direction) in enumerate(directions, start=1):
            state = (current, index)
            if state in seen:
                raise PathError(f"no node ending in 'Z' reachable from {start!r}")
            seen.add(state)
            if current not in self.edges:
                raise PathError(f"node {current!r} is not in the network")
            left, right = self.edges[current]
            if direction == "L":
                current = left
            elif direction == "R":
                current = right
            if current not in self.edges:
                raise PathError(f"node {current!r} is not in the network")
            if current[2:3] == "Z":
                return count
        raise AssertionError("unreachable")

    def ghost_steps(self) -> int:
        """Moves until every walk from a node ending in 'A' stands on one ending in 'Z'."""
        starts = sorted(name for name in self.edges if name[2:3] == "A")
        if not starts:
            raise PathError("no start nodes ending in 'A'")
        self._directions()
        return math.lcm(*(self._ghost_walk(start, self._directions()) for start in starts))


def parse_network(lines: Iterable[str]) -> Network:
    """Parse instructions, a blank line, then lines like ``AAA = (BBB, CCC)``."""
    it = iter(lines)
    instructions = next(it, None)
    if instructions is None:
        raise ValueError("empty network description")
    next(it, None)
    network = Network(instructions)
    for line in it:
        if len(line) < 15:
            raise ValueError(f"malformed node line: {line!r}")
        network.add_node(line[0:3], line[7:10], line[12:15])
    return network


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Walk the haunted wasteland network.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    started = time.perf_counter()
    try:
        lines = Path(args.path).read_text().splitlines()
    except OSError:
        print("Cannot open file!", file=sys.stderr)
        return 1

    try:
        network = parse_network(lines)
        if args.part == 1:
            count = network.steps("AAA", "ZZZ")
            print(f"Target node ZZZ reached in {count} steps!")
        else:
            print(f"Result: {network.ghost_steps()}")
    except (PathError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1

    elapsed = int((time.perf_counter() - started) * 1_000_000)
    print(f"Time taken by function: {elapsed} microseconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
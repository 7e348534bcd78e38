"""Scratchcards: score winning numbers and count won copies."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from aocdays.day01 import _solve_file


def _split_card(line: str) -> tuple[str, list[int], list[int]]:
    header, sep, body = line.partition(":")
    if not sep:
        raise ValueError(f"missing ':' in card: {line!r}")
    winning, sep, have = body.partition("|")
    if not sep:
        raise ValueError(f"missing '|' in card: {line!r}")
    return header, [int(n) for n in winning.split()], [int(n) for n in have.split()]


def card_wins(line: str) -> int:
    """Count the winning numbers of a card that appear among the numbers held."""
    _, winning, have = _split_card(line)
    held = set(have)
    return sum(1 for number in winning if number in held)


def card_points(line: str) -> int:
    """Points of a card: 1 for the first match, doubled for each further one."""
    wins = card_wins(line)
    return 0 if wins == 0 else 2 ** (wins - 1)


def total_points(lines: Iterable[str]) -> int:
    """Sum the points of all cards."""
    return sum(card_points(line) for line in lines)


def total_scratchcards(lines: Iterable[str]) -> int:
    """Count original and won copies of scratchcards."""
    copies: Counter[int] = Counter()
    for line in lines:
        header, _, _ = _split_card(line)
        card = int(header[4:])
        wins = card_wins(line)
        copies[card] += 1
        for other in range(card + 1, card + wins + 1):
            copies[other] += copies[card]
    return sum(copies.values())


def main(argv: list[str] | None = None) -> int:
    return _solve_file(
        argv,
        "Score scratchcards.",
        {
            1: ("Points worth in total", total_points),
            2: ("Total number of scratchcards", total_scratchcards),
        },
    )
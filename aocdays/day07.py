"""Camel cards: rank poker-like hands and total their winnings."""

from __future__ import annotations

import argparse
import sys
import time
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

_JOKER = "J"
_FACE_STRENGTH = {"A": 1, "K": 2, "Q": 3, "J": 4, "T": 5}


def hand_type(hand: str, jokers: bool = False) -> int:
    """Rank a hand's type; lower is stronger (five of a kind is the lowest).

    With ``jokers`` set, every ``J`` joins the most common other card.
    """
    counts = Counter(hand)
    if jokers and _JOKER in counts:
        amount = counts.pop(_JOKER)
        if counts:
            most = max(counts.values())
            best = next(card for card in sorted(counts) if counts[card] == most)
            counts[best] += amount
        else:
            counts[_JOKER] = amount

    rank = len(counts) * 2
    sizes = counts.values()
    if rank == 4 and 4 in sizes:  # four of a kind beats a full house
        rank -= 1
    if rank == 6 and 3 in sizes:  # three of a kind beats two pair
        rank -= 1
    return rank


def card_strength(card: str, jokers: bool = False) -> int:
    """Rank a single card; lower is stronger. A joker is the weakest card."""
    if jokers and card == _JOKER:
        return 14
    if card in _FACE_STRENGTH:
        return _FACE_STRENGTH[card]
    return 15 - (ord(card) - ord("0"))


def _parse_hand(line: str) -> tuple[str, int]:
    cards = line[:5]
    bid_text = line[6:].strip()
    if len(cards) < 5 or not bid_text:
        raise ValueError(f"malformed hand: {line!r}")
    return cards, int(bid_text)


def total_winnings(lines: Iterable[str], jokers: bool = False) -> int:
    """Sum each bid multiplied by its hand's rank, the weakest hand ranking 1."""
    hands = [_parse_hand(line) for line in lines]
    hands.sort(
        key=lambda hand: (
            hand_type(hand[0], jokers),
            tuple(card_strength(card, jokers) for card in hand[0]),
        )
    )
    count = len(hands)
    return sum(bid * (count - position) for position, (_, bid) in enumerate(hands))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Total camel card winnings.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    started = time.perf_counter()
    try:
        lines = Path(args.path).read_text().splitlines()
    except OSError:
        print("Cannot open file!", file=sys.stderr)
        return 1

    print(f"Results: {total_winnings(lines, jokers=args.part == 2)}")
    elapsed = int((time.perf_counter() - started) * 1_000_000)
    print(f"Time taken by function: {elapsed} microseconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Cube conundrum: games of coloured cubes drawn from a bag."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from aocdays.day01 import _solve_file

_BAG = (12, 13, 14)
_COLOURS = ("red", "green", "blue")


@dataclass(frozen=True)
class Game:
    """A game and the largest count of each colour seen in any draw."""

    id: int
    red: int = 0
    green: int = 0
    blue: int = 0

    def is_possible(self, red: int, green: int, blue: int) -> bool:
        """Whether the game could be played with a bag holding these cubes."""
        return self.red <= red and self.green <= green and self.blue <= blue

    def power(self) -> int:
        """Product of the minimum cube counts needed for this game."""
        return self.red * self.green * self.blue


def _count_before(piece: str, colour: str) -> int:
    position = piece.find(colour)
    return int(piece[: position - 1])


def parse_game(line: str) -> Game:
    """Parse ``Game N: 3 blue, 4 red; ...`` into a :class:`Game`."""
    header, sep, draws = line.partition(":")
    if not sep:
        raise ValueError(f"missing ':' in game record: {line!r}")
    game_id = int(header[5:])
    maxima = dict.fromkeys(_COLOURS, 0)
    for draw in draws.split(";"):
        for piece in draw.split(","):
            for colour in _COLOURS:
                if colour in piece:
                    maxima[colour] = max(maxima[colour], _count_before(piece, colour))
    return Game(game_id, **maxima)


def sum_possible_ids(lines: Iterable[str]) -> int:
    """Sum the ids of games possible with 12 red, 13 green and 14 blue cubes."""
    return sum(game.id for game in map(parse_game, lines) if game.is_possible(*_BAG))


def sum_of_powers(lines: Iterable[str]) -> int:
    """Sum the powers of the minimum cube sets of all games."""
    return sum(parse_game(line).power() for line in lines)


def main(argv: list[str] | None = None) -> int:
    return _solve_file(
        argv,
        "Analyse cube games.",
        {1: ("Sum of IDS", sum_possible_ids), 2: ("Sum of IDS", sum_of_powers)},
    )
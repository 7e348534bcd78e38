"""Solvers for days one to nine of a December programming puzzle calendar."""

__version__ = "1.0.0"
__all__ = [
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
    "day08",
    "day09",
]
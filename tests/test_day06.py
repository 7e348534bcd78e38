import pytest

from aocdays.day06 import (
    main,
    parse_races,
    parse_single_race,
    product_of_ways,
    ways_to_win,
)

EXAMPLE = ["Time:      7  15   30", "Distance:  9  40  200"]


def test_parse_races_pairs_times_with_distances():
    assert parse_races(EXAMPLE) == [(7, 9), (15, 40), (30, 200)]


def test_parse_single_race_joins_digits():
    assert parse_single_race(EXAMPLE) == [(71530, 940200)]


def test_parse_single_race_without_digits_raises():
    with pytest.raises(ValueError):
        parse_single_race(["Time:", "Distance: 9"])


@pytest.mark.parametrize(
    "race, expected",
    [((7, 9), 4), ((15, 40), 8), ((30, 200), 9), ((0, 0), 0), ((-3, 0), 0)],
)
def test_ways_to_win(race, expected):
    assert ways_to_win(*race) == expected


@pytest.mark.parametrize(
    "races, expected",
    [(parse_races(EXAMPLE), 288), (parse_single_race(EXAMPLE), 71503), ([], 1)],
)
def test_product_of_ways(races, expected):
    assert product_of_ways(races) == expected


@pytest.mark.parametrize("race_time", [1, 2, 7, 30, 101])
def test_record_extremes(race_time):
    assert ways_to_win(race_time, race_time * race_time) == 0
    assert ways_to_win(race_time, -1) == race_time


@pytest.mark.parametrize("race_time", [5, 8, 30])
def test_ways_never_grow_with_longer_record(race_time):
    counts = [ways_to_win(race_time, distance) for distance in range(race_time * race_time // 4 + 2)]
    assert counts == sorted(counts, reverse=True)


@pytest.mark.parametrize("part, expected", [("1", 288), ("2", 71503)])
def test_main_prints_result(tmp_path, capsys, part, expected):
    races = tmp_path / "races.txt"
    races.write_text("\n".join(EXAMPLE))
    assert main([str(races), "--part", part]) == 0
    assert f"Results: {expected}" in capsys.readouterr().out
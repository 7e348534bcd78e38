import pytest

from aocdays.day09 import (
    extrapolate_next,
    extrapolate_previous,
    main,
    sum_next,
    sum_previous,
)

EXAMPLE = [
    "0 3 6 9 12 15",
    "1 3 6 10 15 21",
    "10 13 16 21 30 45",
]

POLYNOMIAL_SEQUENCES = [
    [n * n for n in range(8)],
    [2 * n * n * n - n + 7 for n in range(-3, 6)],
    [5 * n - 4 for n in range(6)],
    [9, 9, 9, 9],
]


def test_sum_next_example():
    assert sum_next(EXAMPLE) == 114


def test_sum_previous_example():
    assert sum_previous(EXAMPLE) == 2


def test_constant_sequence():
    assert extrapolate_next([5, 5, 5]) == 5
    assert extrapolate_previous([5, 5, 5]) == 5


def test_empty_sequence_gives_zero():
    assert extrapolate_next([]) == 0
    assert extrapolate_previous([]) == 0
    assert sum_next([""]) == 0


@pytest.mark.parametrize("values", POLYNOMIAL_SEQUENCES)
def test_next_predicts_dropped_last_value(values):
    assert extrapolate_next(values[:-1]) == values[-1]


@pytest.mark.parametrize("values", POLYNOMIAL_SEQUENCES)
def test_previous_predicts_dropped_first_value(values):
    assert extrapolate_previous(values[1:]) == values[0]


@pytest.mark.parametrize("values", POLYNOMIAL_SEQUENCES)
def test_previous_is_next_of_reversed(values):
    assert extrapolate_previous(values) == extrapolate_next(list(reversed(values)))


def test_parsing_stops_at_non_number():
    assert sum_next(["0 3 6 x 100"]) == sum_next(["0 3 6"])


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert f"Results: {sum_next(EXAMPLE)}" in out


def test_main_part_two(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main([str(path), "--part", "2"]) == 0
    assert f"Results: {sum_previous(EXAMPLE)}" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Cannot open file!" in capsys.readouterr().err
# aocdays

Solvers for days one to nine of a December programming puzzle calendar.
Each day lives in its own module (`aocdays.day01` to `aocdays.day09`)
and solves both halves of that day's puzzle. The package has no
dependencies outside the standard library.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Commands

There is one command for each day:

| Command     | Part 1                         | Part 2                          |
|-------------|--------------------------------|---------------------------------|
| `aoc-day01` | calibration values from digits | digits and spelled-out digits  |
| `aoc-day02` | sum of possible game ids       | sum of minimum set powers       |
| `aoc-day03` | sum of part numbers            | sum of gear ratios              |
| `aoc-day04` | scratchcard points             | total scratchcard copies        |
| `aoc-day05` | lowest location of single seeds | lowest location of seed ranges |
| `aoc-day06` | ways to win several races      | ways to win one long race       |
| `aoc-day07` | camel card winnings            | winnings with jokers            |
| `aoc-day08` | steps from `AAA` to `ZZZ`      | ghost steps, `..A` to `..Z`     |
| `aoc-day09` | next values, summed            | previous values, summed         |

Every command takes an optional input path (default `input.txt` in the
working directory) and `--part 1` or `--part 2` (default 1). It prints
the chosen part's answer and the time the work took in microseconds:

    aoc-day01 --part 2 puzzles/day01.txt

If the input file cannot be read, the command prints `Cannot open file!`
to standard error and exits with status 1. `aoc-day08` also exits with
status 1, printing the reason, when a walk cannot reach its goal or the
input is malformed.

## Using the modules

The solvers are plain functions that take the lines of the puzzle input:

```python
from aocdays.day01 import sum_calibration
from aocdays.day04 import total_points, total_scratchcards
from aocdays.day07 import total_winnings

with open("input.txt") as handle:
    lines = handle.read().splitlines()

print(sum_calibration(lines, spelled=True))
print(total_points(lines), total_scratchcards(lines))
print(total_winnings(lines, jokers=True))
```

The functions by day:

- `day01`: `calibration_value(line, spelled=False)`, `sum_calibration(lines, spelled=False)`
- `day02`: `parse_game(line)` returns a `Game` with `is_possible(red, green, blue)`
  and `power()`; `sum_possible_ids(lines)`, `sum_of_powers(lines)`
- `day03`: `part_numbers_sum(lines)`, `gear_ratios_sum(lines)`
- `day04`: `card_wins(line)`, `card_points(line)`, `total_points(lines)`,
  `total_scratchcards(lines)`
- `day05`: `lowest_location(lines)` for single seeds; `parse_almanac(text)`
  returns an `Almanac` whose `all_seed_locations()` gives the mapped
  `SeedRange`s sorted by start, `convert_ranges(ranges, mappings)` sends
  ranges through one map of `Mapping`s, and `closest_range_location(text)`
  gives the lowest location over all seed ranges
- `day06`: `parse_races(lines)`, `parse_single_race(lines)`,
  `ways_to_win(time, distance)`, `product_of_ways(races)`
- `day07`: `hand_type(hand, jokers=False)`, `card_strength(card, jokers=False)`,
  `total_winnings(lines, jokers=False)`; lower ranks are stronger
- `day08`: `parse_network(lines)` returns a `Network` with
  `add_node(parent, left, right)`, `steps(start="AAA", target="ZZZ")` and
  `ghost_steps()`, the least common multiple of the walks from every node
  ending in `A` to a node ending in `Z`. A walk that cannot reach its goal
  raises `PathError`.
- `day09`: `extrapolate_next(values)`, `extrapolate_previous(values)`,
  `sum_next(lines)`, `sum_previous(lines)`

Malformed input raises `ValueError`.

## What it does not do

The package covers days one to nine only and does not fetch puzzle
inputs; each command reads a file you supply.
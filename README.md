# aoc2024

Solutions to the Advent of Code 2024 puzzles for days 1 to 8, and a small
command-line runner that reads puzzle inputs from files and times each answer.

Each day lives in its own module, `aoc2024.day01` to `aoc2024.day08`. Every one
of them has `solve_part1(lines)` and `solve_part2(lines)`. Both take the puzzle
input as a list of lines and return the answer as a string.

| Module  | Puzzle                 | Other public helpers |
|---------|------------------------|----------------------|
| `day01` | Comparing two lists    | `parse_lists` |
| `day02` | Safe reports           | `is_safe_report` |
| `day03` | `mul(a,b)` instructions with `do()` / `don't()` | |
| `day04` | Ceres Search (XMAS)    | |
| `day05` | Print Queue            | `parse_input`, `is_valid_sequence`, `sort_sequence` |
| `day06` | Guard Gallivant        | `Direction`, `find_guard_start`, `patrol_positions`, `causes_loop` |
| `day07` | Bridge Repair          | `Equation`, `parse_input`, `is_valid_equation` |
| `day08` | Resonant Collinearity  | `parse_antennas`, `antinodes_part1`, `antinodes_part2` |

## Installation

```
pip install .
```

The package has no dependencies outside the standard library.

## Command line

Puzzle inputs are read from `inputs/dayNN.txt`, relative to the current
directory, where `NN` is the two-digit day number.

```
aoc2024            # print usage, then run every day from 1 to 25
aoc2024 5          # run both parts of day 5
aoc2024 5 2        # run only part 2 of day 5
```

The same runner is available as `python -m aoc2024.cli`.

Every answer is printed with the time it took in microseconds. The day must be
a number from 1 to 25 and the part must be 1 or 2; otherwise the command prints
an error and exits with status 1. When a single day is run and its input file
cannot be read, or the day has no solution, the error goes to standard error
and the exit status is 1. When all days are run, each failing day prints its
own `Error: ...` line and the run carries on.

## Library use

```python
from aoc2024 import day01
from aoc2024.cli import read_input

lines = read_input("inputs/day01.txt")
print(day01.solve_part1(lines))
print(day01.solve_part2(lines))
```

`aoc2024.cli` also offers:

- `read_input(path)`: the lines of a file, blank lines kept; a final newline
  does not add an empty line at the end.
- `read_input_raw(path)`: the whole file as one string.
- `input_path(day, base="inputs")`: the path `base/dayNN.txt`.
- `run_day(day, part=0, base="inputs")`: run one day (part 0 means both) and
  return an exit code.
- `run_all_days(base="inputs")`: run every day from 1 to 25.

## What it does not do

Only days 1 to 8 have solutions. The runner accepts days 9 to 25, but for
those it reports `no solution for day N` instead of an answer. Puzzle inputs
are not included and are not downloaded; they must be placed in `inputs/` by
hand.

## Tests

```
pip install .[test]
pytest
```
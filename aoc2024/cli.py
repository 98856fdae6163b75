"""Command-line runner for the daily puzzle solutions."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Optional, Union

from aoc2024 import day01, day02, day03, day04, day05, day06, day07, day08

Solver = Callable[[list[str]], str]
PathLike = Union[str, Path]

DEFAULT_BASE = Path("inputs")
PROGRAM_NAME = "aoc2024"
FIRST_DAY = 1
LAST_DAY = 25

SOLUTIONS: dict[int, tuple[Solver, Optional[Solver]]] = {
    1: (day01.solve_part1, day01.solve_part2),
    2: (day02.solve_part1, day02.solve_part2),
    3: (day03.solve_part1, day03.solve_part2),
    4: (day04.solve_part1, day04.solve_part2),
    5: (day05.solve_part1, day05.solve_part2),
    6: (day06.solve_part1, day06.solve_part2),
    7: (day07.solve_part1, day07.solve_part2),
    8: (day08.solve_part1, day08.solve_part2),
}


class MissingSolutionError(LookupError):
    """Raised when no solution is registered for a day."""

    def __str__(self) -> str:
        return f"no solution for day {self.args[0]}"


def read_input(path: PathLike) -> list[str]:
    """Read a file as a list of lines, keeping empty lines.

    A final newline does not produce an extra empty line.
    Raises OSError if the file cannot be opened.
    """
    text = read_input_raw(path)
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def read_input_raw(path: PathLike) -> str:
    """Read a whole file as one string, newlines included."""
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def input_path(day: int, base: PathLike = DEFAULT_BASE) -> Path:
    """Path of the input file for a day, such as inputs/day01.txt."""
    return Path(base) / f"day{day:02d}.txt"


def _solvers(day: int) -> tuple[Solver, Optional[Solver]]:
    try:
        return SOLUTIONS[day]
    except KeyError:
        raise MissingSolutionError(day) from None


def _timed(solver: Solver, lines: list[str]) -> tuple[str, int]:
    start = time.perf_counter_ns()
    result = solver(lines)
    return result, (time.perf_counter_ns() - start) // 1000


def _print_usage() -> None:
    print(f"Usage: {PROGRAM_NAME} <day_number> [part_number]")
    print("  day_number: 1-25 (which day to run)")
    print("  part_number: 1 or 2 (which part to run, default: both)")
    print()
    print("Examples:")
    print(f"  {PROGRAM_NAME} 1      # Run both parts of day 1")
    print(f"  {PROGRAM_NAME} 1 1    # Run only part 1 of day 1")
    print(f"  {PROGRAM_NAME} 1 2    # Run only part 2 of day 1")
    print()


def run_all_days(base: PathLike = DEFAULT_BASE) -> None:
    """Run every day and print each result with its timing."""
    print("Running all days:")
    for day in range(FIRST_DAY, LAST_DAY + 1):
        print(f"Day {day}: ", end="")
        try:
            lines = read_input(input_path(day, base))
            part1, part2 = _solvers(day)
            result, micros = _timed(part1, lines)
            report = f"Part 1: {result} ({micros}μs)"
            if part2 is not None:
                result, micros = _timed(part2, lines)
                report += f" | Part 2: {result} ({micros}μs)"
            print(report)
        except Exception as error:  # each day reports its own failure
            print(f"Error: {error}")


def run_day(day: int, part: int = 0, base: PathLike = DEFAULT_BASE) -> int:
    """Run one day; part 0 means both parts. Returns an exit code."""
    path = input_path(day, base)
    try:
        lines = read_input(path)
        print(f"Advent of Code 2024 - Day {day}")
        print("=" * 41)
        part1, part2 = _solvers(day)
        if part in (0, 1):
            result, micros = _timed(part1, lines)
            print(f"Part 1: {result} ({micros} μs)")
        if part in (0, 2):
            if part2 is not None:
                result, micros = _timed(part2, lines)
                print(f"Part 2: {result} ({micros} μs)")
            elif part == 2:
                print("Part 2: Not available for this day")
    except Exception as error:
        print(f"Error reading input file '{path}': {error}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: no arguments runs all days, else `<day> [part]`."""
    args = list(sys.argv[1:] if argv is None else argv)

    if not args:
        _print_usage()
        run_all_days()
        return 0

    try:
        day = int(args[0])
    except ValueError:
        print("Error: Day must be between 1 and 25", file=sys.stderr)
        return 1
    if not FIRST_DAY <= day <= LAST_DAY:
        print("Error: Day must be between 1 and 25", file=sys.stderr)
        return 1

    part = 0
    if len(args) >= 2:
        try:
            part = int(args[1])
        except ValueError:
            part = -1
        if part not in (1, 2):
            print("Error: Part must be 1 or 2", file=sys.stderr)
            return 1

    return run_day(day, part)


if __name__ == "__main__":
    sys.exit(main())
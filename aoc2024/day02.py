"""Day 2: check reports of levels for safety."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _parse_levels(line: str) -> list[int]:
    levels: list[int] = []
    for token in line.split():
        try:
            levels.append(int(token))
        except ValueError:
            break
    return levels


def is_safe_report(levels: Sequence[int]) -> bool:
    """A report is safe if it is strictly monotone with steps of 1 to 3."""
    increasing = decreasing = False
    for current, following in zip(levels, levels[1:]):
        diff = following - current
        if not 1 <= abs(diff) <= 3:
            return False
        if diff > 0:
            increasing = True
        else:
            decreasing = True
        if increasing and decreasing:
            return False
    return True


def _is_safe_with_dampener(levels: Sequence[int]) -> bool:
    if is_safe_report(levels):
        return True
    return any(
        is_safe_report([*levels[:index], *levels[index + 1:]])
        for index in range(len(levels))
    )


def solve_part1(lines: Iterable[str]) -> str:
    """Number of safe reports."""
    return str(sum(is_safe_report(_parse_levels(line)) for line in lines))


def solve_part2(lines: Iterable[str]) -> str:
    """Number of reports that are safe after removing at most one level."""
    return str(sum(_is_safe_with_dampener(_parse_levels(line)) for line in lines))
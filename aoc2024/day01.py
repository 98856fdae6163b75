"""Day 1: compare two columns of location IDs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def parse_lists(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    """Split lines of two integers into a left and a right column.

    Lines that do not start with two integers are skipped.
    """
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        tokens = line.split()
        try:
            left_num, right_num = int(tokens[0]), int(tokens[1])
        except (IndexError, ValueError):
            continue
        left.append(left_num)
        right.append(right_num)
    return left, right


def solve_part1(lines: Iterable[str]) -> str:
    """Total distance between the sorted columns."""
    left, right = parse_lists(lines)
    total = sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))
    return str(total)


def solve_part2(lines: Iterable[str]) -> str:
    """Similarity score: each left number times its count in the right column."""
    left, right = parse_lists(lines)
    counts = Counter(right)
    return str(sum(number * counts[number] for number in left))
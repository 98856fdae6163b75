"""Day 5: check and repair page orderings against precedence rules."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Mapping, Sequence

Rules = dict[int, set[int]]


def _parse_update(line: str) -> list[int]:
    items = line.split(",")
    if items and items[-1] == "":
        items.pop()
    return [int(item) for item in items]


def parse_input(lines: Sequence[str]) -> tuple[Rules, list[list[int]]]:
    """Split the input into rules "X|Y" and comma-separated updates.

    The two sections are separated by the first empty line. Without one,
    no rules are read and the updates start at the second line.
    """
    separator = next((index for index, line in enumerate(lines) if not line), 0)

    rules: Rules = defaultdict(set)
    for line in lines[:separator]:
        before, _, after = line.partition("|")
        rules[int(before)].add(int(after))

    updates = [
        _parse_update(line) for line in lines[separator + 1:] if line.strip()
    ]
    return dict(rules), updates


def is_valid_sequence(sequence: Sequence[int], rules: Mapping[int, set[int]]) -> bool:
    """True if no page appears after a page that must follow it."""
    first_index: dict[int, int] = {}
    for index, page in enumerate(sequence):
        first_index.setdefault(page, index)

    for index, page in enumerate(sequence):
        for later in rules.get(page, ()):
            position = first_index.get(later)
            if position is not None and position < index:
                return False
    return True


def sort_sequence(sequence: Sequence[int], rules: Mapping[int, set[int]]) -> list[int]:
    """Order the pages by the rules that relate them (Kahn's algorithm)."""
    present = set(sequence)
    successors: dict[int, set[int]] = defaultdict(set)
    for page in sequence:
        for following in rules.get(page, ()):
            if following in present:
                successors[page].add(following)

    in_degree = dict.fromkeys(sequence, 0)
    for targets in successors.values():
        for target in targets:
            in_degree[target] += 1

    queue = deque(page for page in sequence if in_degree[page] == 0)
    ordered: list[int] = []
    while queue:
        page = queue.popleft()
        ordered.append(page)
        for following in successors.get(page, ()):
            in_degree[following] -= 1
            if in_degree[following] == 0:
                queue.append(following)
    return ordered


def _middle(sequence: Sequence[int]) -> int:
    return sequence[len(sequence) // 2]


def solve_part1(lines: Sequence[str]) -> str:
    """Sum of middle pages of the correctly ordered updates."""
    rules, updates = parse_input(lines)
    return str(
        sum(_middle(update) for update in updates if is_valid_sequence(update, rules))
    )


def solve_part2(lines: Sequence[str]) -> str:
    """Sum of middle pages of the incorrectly ordered updates after sorting."""
    rules, updates = parse_input(lines)
    return str(
        sum(
            _middle(sort_sequence(update, rules))
            for update in updates
            if not is_valid_sequence(update, rules)
        )
    )
"""Day 8: Resonant Collinearity, antinodes of same-frequency antennas."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Sequence
from itertools import combinations

Position = tuple[int, int]


def _in_bounds(position: Position, width: int, height: int) -> bool:
    x, y = position
    return 0 <= x < width and 0 <= y < height


def parse_antennas(grid: Sequence[str]) -> dict[str, list[Position]]:
    """Group antenna positions (x, y) by their alphanumeric frequency."""
    antennas: dict[str, list[Position]] = defaultdict(list)
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell.isascii() and cell.isalnum():
                antennas[cell].append((x, y))
    return dict(antennas)


def antinodes_part1(
    a: Position, b: Position, width: int, height: int
) -> list[Position]:
    """The in-bounds points where one antenna is twice as far as the other."""
    dx, dy = b[0] - a[0], b[1] - a[1]
    candidates = [(a[0] - dx, a[1] - dy), (b[0] + dx, b[1] + dy)]
    return [point for point in candidates if _in_bounds(point, width, height)]


def antinodes_part2(
    a: Position, b: Position, width: int, height: int
) -> list[Position]:
    """Both antennas and every in-bounds step along the line through them."""
    dx, dy = b[0] - a[0], b[1] - a[1]
    points = [a, b]

    x, y = a[0] - dx, a[1] - dy
    while _in_bounds((x, y), width, height):
        points.append((x, y))
        x, y = x - dx, y - dy

    x, y = b[0] + dx, b[1] + dy
    while _in_bounds((x, y), width, height):
        points.append((x, y))
        x, y = x + dx, y + dy

    return points


def _count_antinodes(
    lines: Sequence[str],
    antinodes: Callable[[Position, Position, int, int], list[Position]],
) -> int:
    width = len(lines)
    height = len(lines[0])
    unique: set[Position] = set()
    for positions in parse_antennas(lines).values():
        for a, b in combinations(positions, 2):
            unique.update(antinodes(a, b, width, height))
    return len(unique)


def solve_part1(lines: Sequence[str]) -> str:
    """Number of unique antinode locations under the basic rule."""
    return str(_count_antinodes(lines, antinodes_part1))


def solve_part2(lines: Sequence[str]) -> str:
    """Number of unique antinode locations under the harmonic rule."""
    return str(_count_antinodes(lines, antinodes_part2))
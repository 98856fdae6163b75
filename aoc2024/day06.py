"""Day 6: Guard Gallivant patrol simulation."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

Position = tuple[int, int]


class Direction(Enum):
    """Facing of the guard, in clockwise order."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> Position:
        return _DELTAS[self]

    def turn_right(self) -> Direction:
        """The direction 90 degrees clockwise."""
        return Direction((self.value + 1) % 4)


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_GUARD_SYMBOLS = {
    "^": Direction.UP,
    ">": Direction.RIGHT,
    "v": Direction.DOWN,
    "<": Direction.LEFT,
}


def find_guard_start(grid: Sequence[str]) -> tuple[Position, Direction]:
    """Locate the guard and the direction it faces."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell in _GUARD_SYMBOLS:
                return (x, y), _GUARD_SYMBOLS[cell]
    raise ValueError("no guard found in grid")


def _size(grid: Sequence[str]) -> tuple[int, int]:
    return len(grid[0]), len(grid)


def patrol_positions(
    grid: Sequence[str], start: Position, direction: Direction
) -> set[Position]:
    """All positions the guard visits before leaving the grid."""
    width, height = _size(grid)
    x, y = start
    visited: set[Position] = set()
    while 0 <= x < width and 0 <= y < height:
        visited.add((x, y))
        dx, dy = direction.delta
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height and grid[ny][nx] == "#":
            direction = direction.turn_right()
        else:
            x, y = nx, ny
    return visited


def causes_loop(
    grid: Sequence[str],
    start: Position,
    direction: Direction,
    obstruction: Position | None = None,
) -> bool:
    """True if the guard never leaves the grid, with an optional extra obstruction."""
    width, height = _size(grid)
    x, y = start
    seen: set[tuple[int, int, Direction]] = set()
    while 0 <= x < width and 0 <= y < height:
        state = (x, y, direction)
        if state in seen:
            return True
        seen.add(state)
        dx, dy = direction.delta
        nx, ny = x + dx, y + dy
        blocked = (
            0 <= nx < width
            and 0 <= ny < height
            and (grid[ny][nx] == "#" or (nx, ny) == obstruction)
        )
        if blocked:
            direction = direction.turn_right()
        else:
            x, y = nx, ny
    return False


def solve_part1(lines: Sequence[str]) -> str:
    """Number of distinct positions the guard visits."""
    start, direction = find_guard_start(lines)
    return str(len(patrol_positions(lines, start, direction)))


def solve_part2(lines: Sequence[str]) -> str:
    """Number of positions where one new obstruction traps the guard in a loop."""
    start, direction = find_guard_start(lines)
    candidates = patrol_positions(lines, start, direction) - {start}
    count = sum(
        causes_loop(lines, start, direction, (x, y))
        for x, y in candidates
        if lines[y][x] != "#"
    )
    return str(count)
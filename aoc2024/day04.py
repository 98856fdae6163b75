"""Day 4: Ceres Search word puzzle."""

from __future__ import annotations

from collections.abc import Sequence

_TARGET = "XMAS"
_DIRECTIONS = [
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
]


def _word_from(grid: Sequence[str], row: int, col: int, dr: int, dc: int) -> str:
    rows, cols = len(grid), len(grid[0])
    chars = []
    for step in range(len(_TARGET)):
        r, c = row + step * dr, col + step * dc
        if not (0 <= r < rows and 0 <= c < cols):
            break
        chars.append(grid[r][c])
    return "".join(chars)


def solve_part1(lines: Sequence[str]) -> str:
    """Count XMAS in all eight directions."""
    if not lines or not lines[0]:
        return "0"
    cols = len(lines[0])
    count = sum(
        _word_from(lines, row, col, dr, dc) == _TARGET
        for row, line in enumerate(lines)
        for col, char in enumerate(line[:cols])
        if char == "X"
        for dr, dc in _DIRECTIONS
    )
    return str(count)


def _is_mas_pair(first: str, second: str) -> bool:
    return {first, second} == {"M", "S"}


def solve_part2(lines: Sequence[str]) -> str:
    """Count two MAS words crossing diagonally at an A."""
    if not lines or not lines[0]:
        return "0"
    rows, cols = len(lines), len(lines[0])
    count = 0
    for row in range(1, rows - 1):
        for col in range(1, cols - 1):
            if lines[row][col] != "A":
                continue
            above, below = lines[row - 1], lines[row + 1]
            if _is_mas_pair(above[col - 1], below[col + 1]) and _is_mas_pair(
                above[col + 1], below[col - 1]
            ):
                count += 1
    return str(count)
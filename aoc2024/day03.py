"""Day 3: sum the mul instructions hidden in corrupted memory."""

from __future__ import annotations

import re
from collections.abc import Iterable

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_WITH_TOGGLES = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)|do\(\)|don't\(\)")


def solve_part1(lines: Iterable[str]) -> str:
    """Sum of all valid mul(a,b) products."""
    total = sum(
        int(match[1]) * int(match[2])
        for line in lines
        for match in _MUL.finditer(line)
    )
    return str(total)


def solve_part2(lines: Iterable[str]) -> str:
    """Sum of products, honouring do() and don't() across all lines."""
    total = 0
    enabled = True
    for line in lines:
        for match in _WITH_TOGGLES.finditer(line):
            token = match[0]
            if token == "do()":
                enabled = True
            elif token == "don't()":
                enabled = False
            elif enabled:
                total += int(match[1]) * int(match[2])
    return str(total)
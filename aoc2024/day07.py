"""Day 7: Bridge Repair, restoring operators between calibration operands."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Equation:
    """A test value and the operands that should combine to reach it."""

    test_value: int
    operands: list[int] = field(default_factory=list)


def parse_input(lines: Iterable[str]) -> list[Equation]:
    """Parse lines of the form "test_value: operand operand ...".

    Raises ValueError for a line without a numeric test value.
    """
    equations: list[Equation] = []
    for line in lines:
        value_text, _, operands_text = line.partition(":")
        test_value = int(value_text)
        operands = [int(token) for token in operands_text.split()]
        equations.append(Equation(test_value, operands))
    return equations


def _digit_multiplier(number: int) -> int:
    multiplier = 1
    while number > 0:
        multiplier *= 10
        number //= 10
    return multiplier


def is_valid_equation(
    target: int, operands: Sequence[int], allow_concat: bool = False
) -> bool:
    """True if operators placed left to right between the operands give target.

    The search works backwards from the last operand, pruning branches that
    cannot undo a multiplication, concatenation or addition.
    """
    if not operands:
        return False

    def solvable(remaining: int, index: int) -> bool:
        if index == 0:
            return remaining == operands[0]
        current = operands[index]

        if current != 0 and remaining % current == 0:
            if solvable(remaining // current, index - 1):
                return True

        if allow_concat:
            multiplier = _digit_multiplier(current)
            if remaining >= current and (remaining - current) % multiplier == 0:
                if solvable((remaining - current) // multiplier, index - 1):
                    return True

        if remaining >= current and solvable(remaining - current, index - 1):
            return True

        return False

    return solvable(target, len(operands) - 1)


def _calibration_total(lines: Iterable[str], allow_concat: bool) -> int:
    return sum(
        equation.test_value
        for equation in parse_input(lines)
        if equation.operands
        and is_valid_equation(equation.test_value, equation.operands, allow_concat)
    )


def solve_part1(lines: Iterable[str]) -> str:
    """Sum of test values reachable with + and *."""
    return str(_calibration_total(lines, allow_concat=False))


def solve_part2(lines: Iterable[str]) -> str:
    """Sum of test values reachable with +, * and concatenation."""
    return str(_calibration_total(lines, allow_concat=True))
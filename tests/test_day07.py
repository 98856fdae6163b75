import pytest

from aoc2024.day07 import (
    Equation,
    is_valid_equation,
    parse_input,
    solve_part1,
    solve_part2,
)

EXAMPLE = [
    "190: 10 19",
    "3267: 81 40 27",
    "83: 17 5",
    "156: 15 6",
    "7290: 6 8 6 15",
    "161011: 16 10 13",
    "192: 17 8 14",
    "21037: 9 7 18 13",
    "292: 11 6 16 20",
]


def test_parse_input_single_line():
    assert parse_input(["9738: 7 89 52 75 8 1"]) == [
        Equation(9738, [7, 89, 52, 75, 8, 1])
    ]


def test_parse_input_multiple_lines_keeps_order():
    equations = parse_input(EXAMPLE)
    assert len(equations) == len(EXAMPLE)
    assert equations[0] == Equation(190, [10, 19])
    assert equations[-1] == Equation(292, [11, 6, 16, 20])


def test_parse_input_rejects_non_numeric_value():
    with pytest.raises(ValueError):
        parse_input(["abc: 1 2"])


def test_parse_input_rejects_empty_line():
    with pytest.raises(ValueError):
        parse_input([""])


def test_addition_is_found():
    assert is_valid_equation(29, [10, 19]) is True


def test_multiplication_is_found():
    assert is_valid_equation(190, [10, 19]) is True


def test_unreachable_target():
    assert is_valid_equation(83, [17, 5]) is False


def test_concatenation_needs_flag():
    assert is_valid_equation(156, [15, 6]) is False
    assert is_valid_equation(156, [15, 6], allow_concat=True) is True


def test_single_operand():
    assert is_valid_equation(7, [7]) is True
    assert is_valid_equation(8, [7]) is False


def test_empty_operands_are_invalid():
    assert is_valid_equation(0, []) is False


def test_operators_evaluated_left_to_right():
    # 2 + 3 * 4 evaluated left to right gives 20, not 14
    assert is_valid_equation(20, [2, 3, 4]) is True
    assert is_valid_equation(14, [2, 3, 4]) is False


def test_example_part1():
    assert solve_part1(EXAMPLE) == "3749"


def test_example_part2():
    assert solve_part2(EXAMPLE) == "11387"


def test_part2_never_smaller_than_part1():
    assert int(solve_part2(EXAMPLE)) >= int(solve_part1(EXAMPLE))


def test_solve_single_valid_line_returns_test_value():
    assert solve_part1(["190: 10 19"]) == "190"
    assert solve_part2(["156: 15 6"]) == "156"


def test_solve_invalid_line_contributes_nothing():
    assert solve_part1(["156: 15 6"]) == "0"


def test_solve_line_without_operands_is_skipped():
    assert solve_part1(["5:"]) == "0"


@pytest.mark.parametrize(
    "operands",
    [[1, 2, 3], [4, 4], [12, 7, 9, 1], [5]],
)
def test_sum_of_operands_always_valid(operands):
    target = sum(operands)
    assert is_valid_equation(target, operands) is True
    assert is_valid_equation(target, operands, allow_concat=True) is True
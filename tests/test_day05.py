import pytest

from aoc2024.day05 import (
    is_valid_sequence,
    parse_input,
    solve_part1,
    solve_part2,
    sort_sequence,
)

EXAMPLE = """\
47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47""".splitlines()


def test_parse_input_reads_rules_and_updates():
    rules, updates = parse_input(EXAMPLE)
    assert rules[47] == {53, 13, 61, 29}
    assert updates[0] == [75, 47, 61, 53, 29]
    assert len(updates) == 6


def test_parse_input_without_separator_has_no_rules():
    rules, updates = parse_input(["1,2,3", "4,5,6"])
    assert rules == {}
    assert updates == [[4, 5, 6]]


def test_parse_input_rejects_bad_number():
    with pytest.raises(ValueError):
        parse_input(["1|x", "", "1,2"])


@pytest.mark.parametrize(
    ("update", "expected"),
    [
        ([75, 47, 61, 53, 29], True),
        ([97, 61, 53, 29, 13], True),
        ([75, 29, 13], True),
        ([75, 97, 47, 61, 53], False),
        ([61, 13, 29], False),
        ([97, 13, 75, 29, 47], False),
    ],
)
def test_is_valid_sequence(update, expected):
    rules, _ = parse_input(EXAMPLE)
    assert is_valid_sequence(update, rules) is expected


def test_sort_sequence_produces_valid_permutation():
    rules, updates = parse_input(EXAMPLE)
    for update in updates:
        ordered = sort_sequence(update, rules)
        assert sorted(ordered) == sorted(update)
        assert is_valid_sequence(ordered, rules)


def test_sort_sequence_keeps_valid_order():
    rules, _ = parse_input(EXAMPLE)
    update = [75, 47, 61, 53, 29]
    assert sort_sequence(update, rules) == update


def test_sort_sequence_without_rules_keeps_order():
    assert sort_sequence([3, 1, 2], {}) == [3, 1, 2]


def test_solve_part1_example():
    assert solve_part1(EXAMPLE) == "143"


def test_solve_part2_example():
    assert solve_part2(EXAMPLE) == "123"


def test_all_valid_gives_zero_part2():
    lines = ["1|2", "", "1,2,3"]
    assert solve_part2(lines) == "0"
    assert solve_part1(lines) == "2"
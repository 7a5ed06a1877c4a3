import pytest

from advent2024 import day7

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


def test_parse_equations():
    assert day7.parse_equations(["190: 10 19", "83: 17 5"]) == [(190, [10, 19]), (83, [17, 5])]


def test_parse_rejects_line_without_colon():
    with pytest.raises(ValueError):
        day7.parse_equations(["190 10 19"])


def test_addition_and_multiplication():
    assert day7.is_valid_equation([10, 19], 190, day7.PART_ONE_OPERATORS)
    assert day7.is_valid_equation([10, 19], 29, day7.PART_ONE_OPERATORS)
    assert not day7.is_valid_equation([17, 5], 83, day7.PART_ONE_OPERATORS)


def test_concatenation_needs_third_operator():
    assert not day7.is_valid_equation([15, 6], 156, day7.PART_ONE_OPERATORS)
    assert day7.is_valid_equation([15, 6], 156, day7.PART_TWO_OPERATORS)


def test_operators_apply_left_to_right():
    # 2 + 3 * 4 evaluated left to right is 20, not 14
    assert day7.is_valid_equation([2, 3, 4], 20, ["+", "*"])
    assert not day7.is_valid_equation([2, 3, 4], 14, ["+", "*"])


def test_single_number_equation():
    assert day7.is_valid_equation([7], 7, day7.PART_ONE_OPERATORS)
    assert not day7.is_valid_equation([7], 8, day7.PART_ONE_OPERATORS)


def test_unknown_operator_raises():
    with pytest.raises(ValueError):
        day7.is_valid_equation([1, 2], 3, ["-"])


def test_empty_numbers_raise():
    with pytest.raises(ValueError):
        day7.is_valid_equation([], 0, day7.PART_ONE_OPERATORS)


def test_total_counts_only_valid_answers():
    equations = [(190, [10, 19]), (83, [17, 5])]
    assert day7.total_calibration_result(equations, day7.PART_ONE_OPERATORS) == 190


def test_example_parts():
    assert day7.part_one(EXAMPLE) == 3749
    assert day7.part_two(EXAMPLE) == 11387
    assert day7.part_two(EXAMPLE) >= day7.part_one(EXAMPLE)


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert day7.main([str(path)]) == 0
    out = capsys.readouterr().out
    assert f"Answer for part 1: {day7.part_one(EXAMPLE)}" in out


def test_main_missing_file(tmp_path):
    assert day7.main([str(tmp_path / "missing.txt")]) == 1
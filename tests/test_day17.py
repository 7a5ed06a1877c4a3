import pytest

from advent2024.day17 import (
    find_quine_input,
    main,
    parse_program,
    parse_registers,
    part_one,
    part_two,
    run_program,
)

EXAMPLE = [
    "Register A: 729",
    "Register B: 0",
    "Register C: 0",
    "",
    "Program: 0,1,5,4,3,0",
]

QUINE = [
    "Register A: 2024",
    "Register B: 0",
    "Register C: 0",
    "",
    "Program: 0,3,5,4,3,0",
]


def test_parse_registers():
    assert parse_registers(EXAMPLE) == (729, 0, 0)


def test_parse_program():
    assert parse_program(EXAMPLE) == [0, 1, 5, 4, 3, 0]


def test_parse_needs_enough_lines():
    with pytest.raises(ValueError):
        parse_program(EXAMPLE[:3])
    with pytest.raises(ValueError):
        parse_registers(EXAMPLE[:2])


def test_example_part_one():
    assert part_one(EXAMPLE) == "4,6,3,5,6,3,5,2,1,0"


def test_example_part_two():
    assert part_two(QUINE) == 117440


def test_quine_input_reproduces_program():
    program = parse_program(QUINE)
    value = find_quine_input(program, len(program) - 1, 0)
    assert run_program(program, value, 0, 0) == program


def test_find_quine_input_rejects_bad_cursor():
    with pytest.raises(ValueError):
        find_quine_input([0, 3, 5, 4, 3, 0], 6, 0)


def test_invalid_combo_operand_raises():
    with pytest.raises(ValueError):
        run_program([5, 7], 0, 0, 0)


def test_literal_operand_seven_is_allowed():
    assert run_program([1, 7, 5, 5], 0, 0, 0) == [7]


def test_jump_with_zero_a_does_not_loop():
    assert run_program([5, 4, 3, 0], 0, 0, 0) == run_program([5, 4], 0, 0, 0)


@pytest.mark.parametrize("a", [1, 9, 100, 12345])
def test_adv_halves_a(a):
    assert run_program([0, 1, 5, 4], a, 0, 0) == run_program([5, 4], a // 2, 0, 0)


@pytest.mark.parametrize("a", [3, 17, 4096, 98765])
def test_bdv_stores_shifted_a_in_b(a):
    assert run_program([6, 2, 5, 5], a, 0, 0) == run_program([5, 4], a // 4, 0, 0)


def test_output_values_are_three_bits():
    output = run_program([5, 4], 987654321, 0, 0)
    assert len(output) == 1
    assert all(value in range(8) for value in output)


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(QUINE) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert "Answer for part 2: 117440" in capsys.readouterr().out
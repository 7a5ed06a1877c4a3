import operator

import pytest

from advent2024.day24 import (
    Gate,
    binary_output,
    binary_to_decimal,
    find_suspicious_gates,
    get_gates,
    get_wires,
    part_one,
    part_two,
    simulate,
)

EXAMPLE = [
    "x00: 1",
    "x01: 1",
    "x02: 1",
    "y00: 0",
    "y01: 1",
    "y02: 0",
    "",
    "x00 AND y00 -> z00",
    "x01 XOR y01 -> z01",
    "x02 OR y02 -> z02",
]


def test_get_wires():
    wires = get_wires(EXAMPLE)
    assert wires["x00"] == 1
    assert wires["y00"] == 0
    assert wires["z00"] is None
    assert set(wires) == {"x00", "x01", "x02", "y00", "y01", "y02", "z00", "z01", "z02"}


def test_get_gates():
    gates = get_gates(EXAMPLE)
    assert gates[0] == Gate("x00", "AND", "y00", "z00")
    assert [gate.operation for gate in gates] == ["AND", "XOR", "OR"]


def test_short_gate_line_raises():
    with pytest.raises(ValueError):
        get_gates(["a AND -> b"])


@pytest.mark.parametrize(
    "name, oracle", [("AND", operator.and_), ("OR", operator.or_), ("XOR", operator.xor)]
)
@pytest.mark.parametrize("a", [0, 1])
@pytest.mark.parametrize("b", [0, 1])
def test_single_gate(name, oracle, a, b):
    result = simulate({"a": a, "b": b}, [Gate("a", name, "b", "z00")])
    assert result["z00"] == oracle(a, b)


def test_simulate_is_order_independent_and_pure():
    wires = {"a": 1, "b": 1, "d": 0}
    gates = [Gate("a", "AND", "b", "c"), Gate("c", "OR", "d", "z00")]
    forward = simulate(wires, gates)
    backward = simulate(wires, list(reversed(gates)))
    assert forward == backward
    assert forward["z00"] == forward["c"]
    assert "c" not in wires


def test_simulate_stuck_raises():
    with pytest.raises(ValueError):
        simulate({"a": None}, [Gate("a", "AND", "b", "z00")])


def test_simulate_unknown_operation():
    with pytest.raises(ValueError):
        simulate({"a": 1, "b": 0}, [Gate("a", "NAND", "b", "z00")])


@pytest.mark.parametrize("number", [0, 1, 5, 255, 1 << 45])
def test_binary_round_trip(number):
    assert binary_to_decimal(format(number, "b")) == number


def test_binary_to_decimal_empty_and_invalid():
    assert binary_to_decimal("") == 0
    with pytest.raises(ValueError):
        binary_to_decimal("10201")


def test_binary_output_orders_bits():
    wires = {"z00": 1, "z01": 0, "z02": 0, "x00": 1}
    assert binary_output(wires) == "001"


def test_binary_output_unset_wire():
    with pytest.raises(ValueError):
        binary_output({"z00": 1, "z01": None})


def test_part_one_example():
    assert part_one(EXAMPLE) == 4


def test_part_one_matches_simulation():
    wires = simulate(get_wires(EXAMPLE), get_gates(EXAMPLE))
    assert part_one(EXAMPLE) == binary_to_decimal(binary_output(wires))


def test_xor_of_inputs_needs_xor_consumer():
    lonely = Gate("x01", "XOR", "y01", "abc")
    assert find_suspicious_gates([lonely]) == [lonely]
    consumer = Gate("abc", "XOR", "carry", "z01")
    assert find_suspicious_gates([lonely, consumer]) == []


def test_internal_xor_is_suspicious():
    gate = Gate("a", "XOR", "b", "m")
    assert find_suspicious_gates([gate]) == [gate]


def test_non_xor_to_output():
    bad = Gate("a", "OR", "b", "z05")
    last = Gate("a", "OR", "b", "z45")
    assert find_suspicious_gates([bad, last]) == [bad]


def test_and_needs_or_consumer():
    gate = Gate("x01", "AND", "y01", "q")
    assert find_suspicious_gates([gate]) == [gate]
    consumer = Gate("q", "OR", "r", "s")
    assert find_suspicious_gates([gate, consumer]) == []
    first = Gate("x00", "AND", "y00", "c")
    assert find_suspicious_gates([first]) == []


def test_part_two_lists_sorted_outputs():
    lines = ["a XOR b -> mmm", "c OR d -> z05", "x01 AND y01 -> kkk"]
    assert part_two(lines) == "kkk,mmm,z05"
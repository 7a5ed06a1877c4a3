"""Crossed Wires: simulate a circuit of logic gates and spot miswired adder gates."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import NamedTuple

from advent2024.tools import read_text_file, split_string

DEFAULT_INPUT = Path("24") / "data" / "input.txt"

LAST_OUTPUT = "z45"

_OPERATIONS = {
    "AND": lambda a, b: 1 if a == 1 and b == 1 else 0,
    "OR": lambda a, b: 1 if a == 1 or b == 1 else 0,
    "XOR": lambda a, b: 1 if a != b else 0,
}


class Gate(NamedTuple):
    """A two-input gate driving one output wire."""

    left: str
    operation: str
    right: str
    output: str

    def reads(self, wire: str) -> bool:
        return wire in (self.left, self.right)


Wires = dict[str, "int | None"]


def get_wires(lines: Iterable[str]) -> dict[str, int | None]:
    """Initial wire values; wires that only gates drive start as None."""
    wires: dict[str, int | None] = {}
    for line in lines:
        if ":" in line:
            fields = split_string(line, ": ")
            if len(fields) < 2:
                raise ValueError(f"not a wire line: {line!r}")
            wires.setdefault(fields[0], int(fields[1]))
        elif "->" in line:
            fields = split_string(line, " -> ")
            wires.setdefault(fields[1], None)
    return wires


def get_gates(lines: Iterable[str]) -> list[Gate]:
    """Parse 'a OP b -> c' lines."""
    gates = []
    for line in lines:
        if "->" not in line:
            continue
        fields = split_string(line, " ")
        if len(fields) < 5:
            raise ValueError(f"not a gate line: {line!r}")
        gates.append(Gate(fields[0], fields[1], fields[2], fields[4]))
    return gates


def simulate(wires: Mapping[str, int | None], gates: Iterable[Gate]) -> dict[str, int | None]:
    """Run every gate once its inputs are known; return the resulting wire values."""
    values = dict(wires)
    pending = list(gates)
    for gate in pending:
        if gate.operation not in _OPERATIONS:
            raise ValueError(f"unknown gate operation: {gate.operation!r}")
    while pending:
        remaining = []
        for gate in pending:
            a = values.get(gate.left)
            b = values.get(gate.right)
            if a is None or b is None:
                remaining.append(gate)
                continue
            values[gate.output] = _OPERATIONS[gate.operation](a, b)
        if len(remaining) == len(pending):
            raise ValueError("some gates never receive both inputs")
        pending = remaining
    return values


def binary_output(wires: Mapping[str, int | None]) -> str:
    """The z wires as a binary string, z00 as the last (least significant) bit."""
    bits = []
    for name in sorted((name for name in wires if name.startswith("z")), reverse=True):
        value = wires[name]
        if value is None:
            raise ValueError(f"wire {name} has no value")
        bits.append(str(value))
    return "".join(bits)


def binary_to_decimal(bits: str) -> int:
    """Value of a string of '0' and '1'; the empty string is 0."""
    if any(bit not in "01" for bit in bits):
        raise ValueError(f"invalid binary string: {bits!r}")
    return int(bits, 2) if bits else 0


def _feeds(gates: Sequence[Gate], wire: str, operation: str) -> bool:
    return any(other.reads(wire) and other.operation == operation for other in gates)


def find_suspicious_gates(gates: Iterable[Gate]) -> list[Gate]:
    """Gates that break the wiring rules of a ripple-carry adder.

    A gate may appear more than once when it breaks several rules.
    """
    gates = list(gates)
    suspicious: list[Gate] = []
    for gate in gates:
        if gate.operation == "XOR":
            if gate.output.startswith("z"):
                continue
            first, second = gate.left[:1], gate.right[:1]
            if {first, second} == {"x", "y"}:
                if not _feeds(gates, gate.output, "XOR"):
                    suspicious.append(gate)
                continue
            suspicious.append(gate)
            continue
        if gate.output.startswith("z") and gate.output != LAST_OUTPUT:
            suspicious.append(gate)
        if gate.operation == "AND":
            if gate.left in ("x00", "y00"):
                continue
            if not _feeds(gates, gate.output, "OR"):
                suspicious.append(gate)
    return suspicious


def part_one(lines: Sequence[str]) -> int:
    wires = simulate(get_wires(lines), get_gates(lines))
    return binary_to_decimal(binary_output(wires))


def part_two(lines: Sequence[str]) -> str:
    outputs = {gate.output for gate in find_suspicious_gates(get_gates(lines))}
    return ",".join(sorted(outputs))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate the gate circuit.")
    parser.add_argument("input", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    try:
        lines = read_text_file(args.input)
    except OSError as exc:
        print(f"ERROR: could not read {args.input}: {exc}", file=sys.stderr)
        return 1
    print(f"Answer for part 1: {part_one(lines)}")
    print(f"Answer for part 2: {part_two(lines)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
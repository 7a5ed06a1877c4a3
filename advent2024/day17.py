"""Chronospatial Computer: run a 3-bit program and find the input that makes it a quine."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from advent2024.tools import read_text_file, split_string

DEFAULT_INPUT = Path("17") / "data" / "input.txt"


def parse_registers(lines: Sequence[str]) -> tuple[int, int, int]:
    """Read registers A, B and C from the first three lines."""
    if len(lines) < 3:
        raise ValueError("the input must start with three register lines")
    values = []
    for line in lines[:3]:
        fields = split_string(line, " ")
        if len(fields) < 3:
            raise ValueError(f"not a register line: {line!r}")
        values.append(int(fields[2]))
    return values[0], values[1], values[2]


def parse_program(lines: Sequence[str]) -> list[int]:
    """Read the comma-separated program from the fifth line."""
    if len(lines) < 5:
        raise ValueError("the input must hold a program on its fifth line")
    fields = split_string(lines[4], " ")
    if len(fields) < 2:
        raise ValueError(f"not a program line: {lines[4]!r}")
    return [int(value) for value in split_string(fields[1], ",")]


def _combo(operand: int, a: int, b: int, c: int) -> int:
    if 0 <= operand <= 3:
        return operand
    if operand == 4:
        return a
    if operand == 5:
        return b
    if operand == 6:
        return c
    raise ValueError(f"invalid combo operand: {operand}")


def run_program(program: Sequence[int], a: int, b: int, c: int) -> list[int]:
    """Run the program with the given registers and return the values it outputs."""
    output: list[int] = []
    pointer = 0
    while pointer + 1 < len(program):
        opcode, operand = program[pointer], program[pointer + 1]
        if opcode == 0:
            a >>= _combo(operand, a, b, c)
        elif opcode == 1:
            b ^= operand
        elif opcode == 2:
            b = _combo(operand, a, b, c) % 8
        elif opcode == 3:
            if a != 0:
                pointer = operand
                continue
        elif opcode == 4:
            b ^= c
        elif opcode == 5:
            output.append(_combo(operand, a, b, c) % 8)
        elif opcode == 6:
            b = a >> _combo(operand, a, b, c)
        elif opcode == 7:
            c = a >> _combo(operand, a, b, c)
        pointer += 2
    return output


def find_quine_input(program: Sequence[int], cursor: int, so_far: int) -> int:
    """Find the smallest value of A, built three bits at a time, that outputs the program.

    Works backwards from ``cursor``: each step appends three bits to ``so_far``
    and keeps the candidates whose output matches the program from ``cursor`` on.
    Returns 0 when no value is found.
    """
    program = list(program)
    if not 0 <= cursor < len(program):
        raise ValueError(f"cursor {cursor} is outside the program")
    target = program[cursor:]
    for candidate in range(8):
        value = so_far * 8 + candidate
        output = run_program(program, value, 0, 0)
        if output and len(output) <= len(target) and output == target[: len(output)]:
            if cursor == 0:
                return value
            found = find_quine_input(program, cursor - 1, value)
            if found > 0:
                return found
    return 0


def part_one(lines: Sequence[str]) -> str:
    a, b, c = parse_registers(lines)
    return ",".join(str(value) for value in run_program(parse_program(lines), a, b, c))


def part_two(lines: Sequence[str]) -> int:
    program = parse_program(lines)
    if not program:
        raise ValueError("the program is empty")
    return find_quine_input(program, len(program) - 1, 0)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the 3-bit computer.")
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
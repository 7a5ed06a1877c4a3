"""Bridge Repair: find equations that some choice of operators makes true."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from itertools import product
from pathlib import Path

from advent2024.tools import is_string_digits, read_text_file, split_string

DEFAULT_INPUT = Path("7") / "data" / "input.txt"

PART_ONE_OPERATORS = ("+", "*")
PART_TWO_OPERATORS = ("+", "*", "|")

_KNOWN_OPERATORS = frozenset(PART_TWO_OPERATORS)


def parse_equations(lines: Iterable[str]) -> list[tuple[int, list[int]]]:
    """Parse 'answer: n1 n2 ...' lines into (answer, numbers) pairs."""
    equations = []
    for line in lines:
        fields = split_string(line, ":")
        if len(fields) < 2:
            raise ValueError(f"not an equation: {line!r}")
        numbers = [
            int(token)
            for token in split_string(fields[1], " ")
            if token and is_string_digits(token)
        ]
        equations.append((int(fields[0].strip()), numbers))
    return equations


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "*":
        return left * right
    return int(f"{left}{right}")


def is_valid_equation(numbers: Sequence[int], answer: int, operators: Iterable[str]) -> bool:
    """True if placing operators left to right between the numbers yields ``answer``.

    Operators are '+', '*' and '|' (digit concatenation).
    """
    operators = tuple(operators)
    unknown = set(operators) - _KNOWN_OPERATORS
    if unknown:
        raise ValueError(f"unknown operators: {sorted(unknown)}")
    if not numbers:
        raise ValueError("an equation needs at least one number")
    for choice in product(operators, repeat=len(numbers) - 1):
        result = numbers[0]
        for operator, number in zip(choice, numbers[1:]):
            result = _apply(operator, result, number)
        if result == answer:
            return True
    return False


def total_calibration_result(
    equations: Iterable[tuple[int, Sequence[int]]], operators: Iterable[str]
) -> int:
    """Sum of the answers of the equations that can be made true."""
    operators = tuple(operators)
    return sum(
        answer for answer, numbers in equations if is_valid_equation(numbers, answer, operators)
    )


def part_one(lines: Iterable[str]) -> int:
    return total_calibration_result(parse_equations(lines), PART_ONE_OPERATORS)


def part_two(lines: Iterable[str]) -> int:
    return total_calibration_result(parse_equations(lines), PART_TWO_OPERATORS)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum the calibration results.")
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
"""Mull It Over: add up the products of the valid mul(a,b) instructions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from advent2024.tools import is_string_digits, read_text_file

DEFAULT_INPUT = Path("3") / "data" / "input.txt"

_MUL = "mul("
_DO = "do()"
_DONT = "don't()"


def _char_at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def _instructions_in_line(line: str) -> Iterable[tuple[int, int]]:
    position = line.find(_MUL)
    while position != -1:
        pair = _parse_mul_at(line, position)
        if pair is not None:
            yield pair
        position = line.find(_MUL, position + 1)


def _parse_mul_at(line: str, start: int) -> tuple[int, int] | None:
    if "," not in {_char_at(line, start + offset) for offset in (5, 6, 7)}:
        return None
    if ")" not in {_char_at(line, start + offset) for offset in range(7, 13)}:
        return None
    comma = line.find(",", start)
    close = line.find(")", start)
    first = line[start + len(_MUL):comma]
    second = line[comma + 1:close]
    if not (first and second and is_string_digits(first) and is_string_digits(second)):
        return None
    return int(first), int(second)


def get_mul_instructions(lines: Iterable[str]) -> list[tuple[int, int]]:
    """Find the number pairs of every well-formed mul instruction, line by line."""
    return [pair for line in lines for pair in _instructions_in_line(line)]


def multiply_mul_instructions(pairs: Iterable[tuple[int, int]]) -> list[int]:
    """Product of each pair."""
    return [a * b for a, b in pairs]


def remove_invalid_instructions(lines: Iterable[str]) -> list[str]:
    """Join the lines and cut out each span from don't() up to the next do().

    A don't() left without a following do() is cut to the end of the text,
    except when the text holds no don't()...do() span at all.
    """
    text = "".join(lines)
    dont = text.find(_DONT)
    do = text.find(_DO, dont) if dont != -1 else -1
    while dont != -1 and do != -1:
        text = text[:dont] + text[do:]
        dont = text.find(_DONT)
        do = text.find(_DO, dont) if dont != -1 else -1
        if do == -1 and dont != -1:
            text = text[:dont]
    return [text]


def part_one(lines: Iterable[str]) -> int:
    return sum(multiply_mul_instructions(get_mul_instructions(lines)))


def part_two(lines: Iterable[str]) -> int:
    return sum(multiply_mul_instructions(get_mul_instructions(remove_invalid_instructions(lines))))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Add up mul instructions.")
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
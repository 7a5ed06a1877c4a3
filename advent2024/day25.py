"""Code Chronicle: count the lock and key pairs that fit without overlapping."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

from advent2024.tools import read_text_file

DEFAULT_INPUT = Path("25") / "data" / "input.txt"

SCHEMATIC_ROWS = 7
SPACE = 5

_STRIDE = SCHEMATIC_ROWS + 1


def _schematics(lines: Sequence[str]) -> Iterator[Sequence[str]]:
    for start in range(0, len(lines), _STRIDE):
        block = lines[start:start + SCHEMATIC_ROWS]
        if len(block) < SCHEMATIC_ROWS:
            raise ValueError(f"incomplete schematic starting at line {start + 1}")
        yield block


def _heights(block: Sequence[str], width: int) -> list[int]:
    inner = block[1:1 + SPACE]
    return [sum(1 for row in inner if row[col:col + 1] == "#") for col in range(width)]


def get_keys(lines: Sequence[str]) -> list[list[int]]:
    """Column heights of the key schematics (filled bottom row)."""
    width = len(lines[0]) if lines else 0
    return [
        _heights(block, width)
        for block in _schematics(lines)
        if block[SCHEMATIC_ROWS - 1].startswith("#")
    ]


def get_locks(lines: Sequence[str]) -> list[list[int]]:
    """Column heights of the lock schematics (filled top row)."""
    width = len(lines[0]) if lines else 0
    return [_heights(block, width) for block in _schematics(lines) if block[0].startswith("#")]


def count_valid_combinations(
    keys: Sequence[Sequence[int]], locks: Sequence[Sequence[int]]
) -> int:
    """Number of key and lock pairs whose columns never add up to more than the space."""
    return sum(
        1
        for key in keys
        for lock in locks
        if all(k + l <= SPACE for k, l in zip(key, lock))
    )


def part_one(lines: Sequence[str]) -> int:
    return count_valid_combinations(get_keys(lines), get_locks(lines))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count fitting lock and key pairs.")
    parser.add_argument("input", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    try:
        lines = read_text_file(args.input)
    except OSError as exc:
        print(f"ERROR: could not read {args.input}: {exc}", file=sys.stderr)
        return 1
    print(f"Answer for part 1: {part_one(lines)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
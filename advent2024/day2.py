"""Red-Nosed Reports: count safe level reports, with and without a dampener."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from itertools import combinations, pairwise
from pathlib import Path

from advent2024.tools import get_integers_from_string, read_text_file

DEFAULT_INPUT = Path("2") / "data" / "input.txt"


def convert_strings_to_integers(lines: Iterable[str]) -> list[list[int]]:
    """Parse each line into its list of levels."""
    return [get_integers_from_string(line) for line in lines]


def is_safe(levels: Sequence[int]) -> bool:
    """A report is safe if it moves steadily in one direction by 1 to 3 per step."""
    steps = [b - a for a, b in pairwise(levels)]
    if not all(1 <= abs(step) <= 3 for step in steps):
        return False
    return all(step > 0 for step in steps) or all(step < 0 for step in steps)


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """A report is safe if it is safe already or becomes safe without one level."""
    if is_safe(levels):
        return True
    return any(is_safe(reduced) for reduced in combinations(levels, len(levels) - 1))


def count_safe(reports: Iterable[Sequence[int]]) -> int:
    """Number of safe reports."""
    return sum(1 for report in reports if is_safe(report))


def count_safe_with_dampener(reports: Iterable[Sequence[int]]) -> int:
    """Number of reports that are safe with the dampener."""
    return sum(1 for report in reports if is_safe_with_dampener(report))


def part_one(lines: Iterable[str]) -> int:
    return count_safe(convert_strings_to_integers(lines))


def part_two(lines: Iterable[str]) -> int:
    return count_safe_with_dampener(convert_strings_to_integers(lines))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count safe reports.")
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
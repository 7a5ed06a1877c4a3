"""Ceres Search: find a word in a letter grid, and find crossed MAS shapes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from advent2024.tools import read_text_file

DEFAULT_INPUT = Path("4") / "data" / "input.txt"
WORD = "XMAS"

_DIRECTIONS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]
_MS = {"M", "S"}


def _at(grid: Sequence[str], row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return ""


def _spells(grid: Sequence[str], word: str, row: int, col: int, dr: int, dc: int) -> bool:
    return all(
        _at(grid, row + dr * step, col + dc * step) == letter
        for step, letter in enumerate(word)
    )


def count_occurrences(grid: Sequence[str], word: str) -> int:
    """Count the times ``word`` appears in any of the eight directions.

    Words shorter than two letters are never counted.
    """
    if not word:
        raise ValueError("word must not be empty")
    if len(word) < 2:
        return 0
    return sum(
        1
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == word[0]
        for dr, dc in _DIRECTIONS
        if _spells(grid, word, row, col, dr, dc)
    )


def count_x_mas(grid: Sequence[str]) -> int:
    """Count the 'A's crossed by two diagonal MAS words, each read either way."""
    count = 0
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char != "A":
                continue
            main_diagonal = {_at(grid, row - 1, col - 1), _at(grid, row + 1, col + 1)}
            anti_diagonal = {_at(grid, row - 1, col + 1), _at(grid, row + 1, col - 1)}
            if main_diagonal == _MS and anti_diagonal == _MS:
                count += 1
    return count


def part_one(lines: Sequence[str]) -> int:
    return count_occurrences(lines, WORD)


def part_two(lines: Sequence[str]) -> int:
    return count_x_mas(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search the word grid.")
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
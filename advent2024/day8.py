"""Resonant Collinearity: mark antinodes of same-frequency antenna pairs."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping, Sequence
from itertools import combinations
from pathlib import Path

from advent2024.tools import read_text_file

DEFAULT_INPUT = Path("8") / "data" / "input.txt"

Position = tuple[int, int]
Locations = Mapping[str, Sequence[Position]]


def character_locations(grid: Sequence[str]) -> dict[str, list[Position]]:
    """Map each antenna character to its (row, column) positions, frequencies sorted."""
    found: dict[str, list[Position]] = {}
    width = len(grid[0]) if grid else 0
    for row, line in enumerate(grid):
        for col, char in enumerate(line[:width]):
            if char != ".":
                found.setdefault(char, []).append((row, col))
    return {char: found[char] for char in sorted(found)}


def _pairs(locations: Locations):
    for positions in locations.values():
        for first, second in combinations(positions, 2):
            if first != second:
                yield first, second


def _inside(cells: list[list[str]], row: int, col: int) -> bool:
    return 0 <= row < len(cells) and 0 <= col < len(cells[0])


def antinode_map(grid: Sequence[str], locations: Locations) -> list[str]:
    """Copy of the grid with '#' on the antinode beyond each end of every pair."""
    cells = [list(line) for line in grid]
    for (r1, c1), (r2, c2) in _pairs(locations):
        dr, dc = r2 - r1, c2 - c1
        for row, col in ((r2 + dr, c2 + dc), (r1 - dr, c1 - dc)):
            if _inside(cells, row, col):
                cells[row][col] = "#"
    return ["".join(line) for line in cells]


def antinode_map_with_harmonics(grid: Sequence[str], locations: Locations) -> list[str]:
    """Copy of the grid with '#' on every point in line with a pair, at whole steps."""
    cells = [list(line) for line in grid]
    for (r1, c1), (r2, c2) in _pairs(locations):
        dr, dc = r2 - r1, c2 - c1
        cells[r2][c2] = "#"
        cells[r1][c1] = "#"
        row, col = r2 + dr, c2 + dc
        while _inside(cells, row, col):
            cells[row][col] = "#"
            row, col = row + dr, col + dc
        row, col = r1 - dr, c1 - dc
        while _inside(cells, row, col):
            cells[row][col] = "#"
            row, col = row - dr, col - dc
    return ["".join(line) for line in cells]


def count_antinodes(grid: Sequence[str]) -> int:
    """Number of '#' marks in the grid."""
    return sum(line.count("#") for line in grid)


def part_one(lines: Sequence[str]) -> int:
    return count_antinodes(antinode_map(lines, character_locations(lines)))


def part_two(lines: Sequence[str]) -> int:
    return count_antinodes(antinode_map_with_harmonics(lines, character_locations(lines)))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count antenna antinodes.")
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
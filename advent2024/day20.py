"""Race Condition: count the cheats that shorten a single-track race."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from advent2024.pathfinder import Position, find_path
from advent2024.tools import read_text_file

DEFAULT_INPUT = Path("20") / "data" / "input.txt"
MIN_SAVING = 100
LONG_CHEAT = 20

_STEPS: tuple[Position, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


def find_tile(grid: Sequence[str], char: str) -> Position:
    """The (x, y) position of the last cell holding ``char``."""
    found = None
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == char:
                found = (x, y)
    if found is None:
        raise ValueError(f"no {char!r} in the grid")
    return found


def race_path(grid: Sequence[str]) -> list[Position]:
    """The shortest route from 'S' to 'E', both ends included."""
    path = find_path(grid, find_tile(grid, "S"), find_tile(grid, "E"))
    if not path:
        raise ValueError("the end cannot be reached from the start")
    return path


def count_cheats(grid: Sequence[str], path: Sequence[Position], threshold: int = MIN_SAVING) -> int:
    """Count two-step cheats through one wall that save at least ``threshold``.

    A cheat starts on the path, passes a single wall cell and lands on an open
    cell further along the path; it saves the skipped steps less the two it takes.
    """
    height = len(grid)
    width = len(grid[0]) if grid else 0
    index = {position: i for i, position in enumerate(path)}
    savings: dict[tuple[Position, Position], int] = {}
    for i, (x, y) in enumerate(path):
        for dx, dy in _STEPS:
            wx, wy = x + dx, y + dy
            ex, ey = wx + dx, wy + dy
            if not (0 <= ex < width and 0 <= ey < height):
                continue
            if grid[wy][wx] != "#" or grid[ey][ex] == "#":
                continue
            j = index.get((ex, ey))
            if j is None or j < i:
                continue
            savings.setdefault(((x, y), (ex, ey)), j - i - 2)
    return sum(1 for saved in savings.values() if saved >= threshold)


def count_long_cheats(
    grid: Sequence[str],
    path: Sequence[Position],
    max_length: int = LONG_CHEAT,
    threshold: int = MIN_SAVING,
) -> int:
    """Count cheats of up to ``max_length`` steps that save at least ``threshold``.

    A cheat joins a path cell to a later path cell; it saves the skipped steps
    less its own length.
    """
    if max_length < 0:
        raise ValueError(f"negative cheat length: {max_length}")
    index = {position: i for i, position in enumerate(path)}
    offsets = [
        (dx, dy, abs(dx) + abs(dy))
        for dx in range(-max_length, max_length + 1)
        for dy in range(-max_length, max_length + 1)
        if abs(dx) + abs(dy) <= max_length
    ]
    total = 0
    for i, (x, y) in enumerate(path):
        for dx, dy, length in offsets:
            j = index.get((x + dx, y + dy))
            if j is not None and j >= i and j - i - length >= threshold:
                total += 1
    return total


def part_one(lines: Sequence[str]) -> int:
    return count_cheats(lines, race_path(lines))


def part_two(lines: Sequence[str]) -> int:
    return count_long_cheats(lines, race_path(lines))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count race track cheats.")
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
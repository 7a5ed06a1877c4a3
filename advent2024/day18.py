"""RAM Run: walk a memory grid as falling bytes block it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from advent2024.pathfinder import Position, find_path
from advent2024.tools import read_text_file, split_string

DEFAULT_INPUT = Path("18") / "data" / "input.txt"
GRID_SIZE = 71
BYTES_FALLEN = 1024


def parse_walls(lines: Iterable[str]) -> list[Position]:
    """Parse 'x,y' lines into positions."""
    walls = []
    for line in lines:
        fields = split_string(line, ",")
        if len(fields) < 2:
            raise ValueError(f"not a coordinate: {line!r}")
        walls.append((int(fields[0]), int(fields[1])))
    return walls


def empty_grid(width: int, height: int) -> list[str]:
    """A grid of '.' cells."""
    if width < 0 or height < 0:
        raise ValueError(f"invalid grid size: {width}x{height}")
    return ["." * width for _ in range(height)]


def add_walls(grid: Sequence[str], walls: Sequence[Position], count: int) -> list[str]:
    """Copy of the grid with the first ``count`` walls marked '#'."""
    if not 0 <= count <= len(walls):
        raise ValueError(f"cannot place {count} of {len(walls)} walls")
    cells = [list(row) for row in grid]
    for x, y in walls[:count]:
        if not (0 <= y < len(cells) and 0 <= x < len(cells[y])):
            raise ValueError(f"wall outside the grid: {x},{y}")
        cells[y][x] = "#"
    return ["".join(row) for row in cells]


def _corners(size: int) -> tuple[Position, Position]:
    return (0, 0), (size - 1, size - 1)


def shortest_path_length(lines: Iterable[str], size: int, count: int) -> int | None:
    """Fewest steps from corner to corner after ``count`` bytes fell; None if blocked."""
    grid = add_walls(empty_grid(size, size), parse_walls(lines), count)
    start, goal = _corners(size)
    path = find_path(grid, start, goal)
    return len(path) - 1 if path else None


def first_blocking_wall(lines: Iterable[str], size: int, count: int) -> Position | None:
    """The first byte after the first ``count`` whose fall cuts the corners apart.

    Returns None if every byte has fallen and a path remains.
    """
    walls = parse_walls(lines)
    grid = add_walls(empty_grid(size, size), walls, count)
    start, goal = _corners(size)
    cells = [list(row) for row in grid]
    path = find_path(grid, start, goal)
    on_path = set(path)
    for x, y in walls[count:]:
        if not (0 <= y < size and 0 <= x < size):
            raise ValueError(f"wall outside the grid: {x},{y}")
        cells[y][x] = "#"
        if path and (x, y) not in on_path:
            continue
        path = find_path(["".join(row) for row in cells], start, goal)
        if not path:
            return (x, y)
        on_path = set(path)
    return None


def part_one(lines: Sequence[str]) -> int:
    steps = shortest_path_length(lines, GRID_SIZE, BYTES_FALLEN)
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part_two(lines: Sequence[str]) -> str:
    wall = first_blocking_wall(lines, GRID_SIZE, BYTES_FALLEN)
    if wall is None:
        raise ValueError("no byte blocks the path")
    return f"{wall[0]},{wall[1]}"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Walk the falling-byte memory grid.")
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
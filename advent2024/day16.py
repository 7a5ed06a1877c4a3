"""Reindeer Maze: find the cheapest routes through a maze where turning costs 1000."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterable, Sequence
from itertools import pairwise
from pathlib import Path

from advent2024.pathfinder import Position
from advent2024.tools import read_text_file

DEFAULT_INPUT = Path("16") / "data" / "input.txt"

STEP_COST = 1
TURN_COST = 1000

# East, south, west, north: turning right moves one place along this tuple.
_DIRECTIONS: tuple[Position, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))
_EAST = 0

State = tuple[int, int, int]

__all__ = [
    "find_tile",
    "find_path",
    "all_best_paths",
    "path_cost",
    "count_tiles",
    "part_one",
    "part_two",
    "main",
]


def find_tile(grid: Sequence[str], char: str) -> Position:
    """Position (x, y) of the last tile holding ``char``, scanning row by row.

    Raises ValueError when no tile holds it.
    """
    found: Position | None = None
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == char:
                found = (x, y)
    if found is None:
        raise ValueError(f"no tile {char!r} in the grid")
    return found


def _open(grid: Sequence[str], x: int, y: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[y]) and grid[y][x] != "#"


def _moves(grid: Sequence[str], state: State) -> Iterable[tuple[State, int]]:
    x, y, facing = state
    dx, dy = _DIRECTIONS[facing]
    if _open(grid, x + dx, y + dy):
        yield (x + dx, y + dy, facing), STEP_COST
    yield (x, y, (facing + 1) % 4), TURN_COST
    yield (x, y, (facing - 1) % 4), TURN_COST


def _search(
    grid: Sequence[str], start: Position
) -> tuple[State, dict[State, int], dict[State, list[State]]]:
    """Cheapest cost of every reachable state and the states each is best reached from."""
    begin: State = (start[0], start[1], _EAST)
    dist: dict[State, int] = {begin: 0}
    preds: dict[State, list[State]] = {begin: []}
    heap: list[tuple[int, State]] = [(0, begin)]
    while heap:
        cost, state = heapq.heappop(heap)
        if cost > dist[state]:
            continue
        for following, step in _moves(grid, state):
            new_cost = cost + step
            known = dist.get(following)
            if known is None or new_cost < known:
                dist[following] = new_cost
                preds[following] = [state]
                heapq.heappush(heap, (new_cost, following))
            elif new_cost == known:
                preds[following].append(state)
    return begin, dist, preds


def _best_goal_states(dist: dict[State, int], goal: Position) -> list[State]:
    reached = [
        (dist[state], state)
        for facing in range(4)
        if (state := (goal[0], goal[1], facing)) in dist
    ]
    if not reached:
        return []
    best = min(cost for cost, _ in reached)
    return [state for cost, state in reached if cost == best]


def _positions(states: Iterable[State]) -> list[Position]:
    path: list[Position] = []
    for x, y, _ in states:
        if not path or path[-1] != (x, y):
            path.append((x, y))
    return path


def find_path(grid: Sequence[str], start: Position, goal: Position) -> list[Position]:
    """One cheapest route from ``start`` (facing east) to ``goal``, as positions.

    Returns an empty list when the goal cannot be reached.
    """
    begin, dist, preds = _search(grid, start)
    goals = _best_goal_states(dist, goal)
    if not goals:
        return []
    chain = [goals[0]]
    while chain[-1] != begin:
        chain.append(preds[chain[-1]][0])
    chain.reverse()
    return _positions(chain)


def all_best_paths(grid: Sequence[str], start: Position, goal: Position) -> list[list[Position]]:
    """Every distinct cheapest route from ``start`` (facing east) to ``goal``."""
    begin, dist, preds = _search(grid, start)
    stack: list[tuple[State, list[State]]] = [
        (state, [state]) for state in _best_goal_states(dist, goal)
    ]
    seen: set[tuple[Position, ...]] = set()
    paths: list[list[Position]] = []
    while stack:
        state, chain = stack.pop()
        if state == begin:
            path = _positions(reversed(chain))
            key = tuple(path)
            if key not in seen:
                seen.add(key)
                paths.append(path)
            continue
        for previous in preds[state]:
            stack.append((previous, chain + [previous]))
    return paths


def path_cost(path: Sequence[Position]) -> int:
    """Score of a route that starts facing east.

    Each step costs 1; a quarter turn before it adds 1000, a reversal 2000.
    """
    facing = _DIRECTIONS[_EAST]
    cost = 0
    for (x1, y1), (x2, y2) in pairwise(path):
        step = (x2 - x1, y2 - y1)
        if step not in _DIRECTIONS:
            raise ValueError(f"positions are not adjacent: {(x1, y1)} -> {(x2, y2)}")
        if step == facing:
            cost += STEP_COST
        elif step == (-facing[0], -facing[1]):
            cost += 2 * TURN_COST + STEP_COST
        else:
            cost += TURN_COST + STEP_COST
        facing = step
    return cost


def count_tiles(grid: Sequence[str], paths: Iterable[Sequence[Position]]) -> int:
    """Mark every tile of the paths with 'O' and count the 'O' tiles of the grid."""
    cells = [list(row) for row in grid]
    for path in paths:
        for x, y in path:
            cells[y][x] = "O"
    return sum(row.count("O") for row in cells)


def part_one(lines: Sequence[str]) -> int:
    path = find_path(lines, find_tile(lines, "S"), find_tile(lines, "E"))
    if not path:
        raise ValueError("the end cannot be reached from the start")
    return path_cost(path)


def part_two(lines: Sequence[str]) -> int:
    paths = all_best_paths(lines, find_tile(lines, "S"), find_tile(lines, "E"))
    if not paths:
        raise ValueError("the end cannot be reached from the start")
    return count_tiles(lines, paths)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score the reindeer maze.")
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
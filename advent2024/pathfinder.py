"""A* search over a character grid where '#' marks a wall."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import count

Position = tuple[int, int]

WALL = "#"

# Left, down, right, up: the order in which neighbours are explored.
_STEPS: tuple[Position, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


def manhattan_distance(a: Position, b: Position) -> int:
    """Grid distance between two (x, y) positions."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def get_neighbors(grid: Sequence[str], position: Position) -> list[Position]:
    """The in-bounds, non-wall cells next to ``position``, as (x, y) pairs."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    x, y = position
    neighbours = []
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height and grid[ny][nx] != WALL:
            neighbours.append((nx, ny))
    return neighbours


def find_path(grid: Sequence[str], start: Position, goal: Position) -> list[Position]:
    """A shortest path from ``start`` to ``goal``, both ends included.

    Every step costs one. Returns an empty list when the goal cannot be reached.
    """
    tiebreak = count()
    open_heap: list[tuple[int, int, Position]] = [
        (manhattan_distance(start, goal), next(tiebreak), start)
    ]
    cost: dict[Position, int] = {start: 0}
    parent: dict[Position, Position | None] = {start: None}
    closed: set[Position] = set()

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current == goal:
            path = []
            node: Position | None = current
            while node is not None:
                path.append(node)
                node = parent[node]
            path.reverse()
            return path
        if current in closed:
            continue
        closed.add(current)
        new_cost = cost[current] + 1
        for neighbour in get_neighbors(grid, current):
            if neighbour in closed:
                continue
            if new_cost < cost.get(neighbour, new_cost + 1):
                cost[neighbour] = new_cost
                parent[neighbour] = current
                priority = new_cost + manhattan_distance(neighbour, goal)
                heapq.heappush(open_heap, (priority, next(tiebreak), neighbour))
    return []
"""LAN Party: find triangles and the largest clique in a network of computers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Mapping, Sequence, Set
from itertools import combinations
from pathlib import Path

from advent2024.tools import read_text_file, split_string

DEFAULT_INPUT = Path("23") / "data" / "input.txt"

Graph = Mapping[str, Set[str]]


def get_adjacency_list(lines: Iterable[str]) -> dict[str, set[str]]:
    """Parse 'a-b' connections into an undirected adjacency map; blank lines are skipped."""
    graph: dict[str, set[str]] = {}
    for line in lines:
        text = line.strip()
        if not text:
            continue
        parts = split_string(text, "-")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"not a connection: {line!r}")
        first, second = parts
        graph.setdefault(first, set()).add(second)
        graph.setdefault(second, set()).add(first)
    return graph


def find_triangles(graph: Graph) -> list[tuple[str, str, str]]:
    """Every set of three mutually connected computers, each as a sorted tuple."""
    triangles: set[tuple[str, str, str]] = set()
    for node, neighbours in graph.items():
        for second, third in combinations(sorted(neighbours), 2):
            if node in (second, third):
                continue
            if third in graph.get(second, ()):
                a, b, c = sorted((node, second, third))
                triangles.add((a, b, c))
    return sorted(triangles)


def find_maximal_cliques(graph: Graph) -> list[frozenset[str]]:
    """All maximal cliques, found with the Bron–Kerbosch algorithm."""
    neighbours = {node: set(adjacent) - {node} for node, adjacent in graph.items()}
    for adjacent in list(neighbours.values()):
        for other in adjacent:
            neighbours.setdefault(other, set())
    cliques: list[frozenset[str]] = []

    def expand(chosen: set[str], candidates: set[str], excluded: set[str]) -> None:
        if not candidates and not excluded:
            cliques.append(frozenset(chosen))
            return
        pivot = max(candidates | excluded, key=lambda v: len(neighbours[v] & candidates))
        for vertex in sorted(candidates - neighbours[pivot]):
            expand(
                chosen | {vertex},
                candidates & neighbours[vertex],
                excluded & neighbours[vertex],
            )
            candidates = candidates - {vertex}
            excluded = excluded | {vertex}

    expand(set(), set(neighbours), set())
    return cliques


def part_one(lines: Iterable[str]) -> int:
    triangles = find_triangles(get_adjacency_list(lines))
    return sum(1 for triangle in triangles if any(name.startswith("t") for name in triangle))


def part_two(lines: Iterable[str]) -> str:
    """Comma-joined, sorted names of the largest clique."""
    cliques = find_maximal_cliques(get_adjacency_list(lines))
    if not cliques:
        return ""
    largest = max(len(clique) for clique in cliques)
    return min(",".join(sorted(clique)) for clique in cliques if len(clique) == largest)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyse the LAN party network.")
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
"""Keypad Conundrum: type door codes through a chain of robot-operated keypads."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from itertools import permutations
from pathlib import Path

from advent2024.tools import read_text_file

DEFAULT_INPUT = Path("21") / "data" / "input.txt"

PART_ONE_ROBOTS = 2
PART_TWO_ROBOTS = 25

GAP = "#"

_LAYOUTS: dict[str, tuple[str, ...]] = {
    "directional": ("#^A", "<v>"),
    "numeric": ("789", "456", "123", "#0A"),
}

# (row, column) offsets of the direction keys.
_STEPS: dict[str, tuple[int, int]] = {
    "^": (-1, 0),
    "v": (1, 0),
    "<": (0, -1),
    ">": (0, 1),
}

_NON_DIGITS = re.compile(r"\D", re.ASCII)

Position = tuple[int, int]


class Keypad:
    """A numeric or directional keypad; positions are (row, column) pairs."""

    def __init__(self, kind: str) -> None:
        try:
            layout = _LAYOUTS[kind]
        except KeyError:
            raise ValueError(f"invalid keypad type: {kind!r}") from None
        self.kind = kind
        self._grid = layout
        self._coordinates: dict[str, Position] = {
            key: (row, col)
            for row, line in enumerate(layout)
            for col, key in enumerate(line)
            if key != GAP
        }
        self.start: Position = self._coordinates["A"]
        self._cache: dict[tuple[str, int], int] = {}

    def _locate(self, key: str) -> Position:
        try:
            return self._coordinates[key]
        except KeyError:
            raise ValueError(f"key {key!r} is not on the {self.kind} keypad") from None

    def _on_pad(self, position: Position) -> bool:
        row, col = position
        return (
            0 <= row < len(self._grid)
            and 0 <= col < len(self._grid[row])
            and self._grid[row][col] != GAP
        )

    def _options(self, source: Position, target: Position) -> list[str]:
        """Every shortest valid move string from ``source`` to ``target``, sorted."""
        d_row = target[0] - source[0]
        d_col = target[1] - source[1]
        moves = "<" * -d_col + ">" * d_col + "v" * d_row + "^" * -d_row
        candidates = sorted({"".join(order) for order in permutations(moves)})
        return [option for option in candidates if self.is_valid(option, source)]

    def shortest_instructions(self, code: str) -> list[str]:
        """All shortest press sequences that type ``code`` on this keypad, from 'A'."""
        sequences = [""]
        position = self.start
        for key in code:
            target = self._locate(key)
            options = self._options(position, target)
            sequences = [prefix + option + "A" for option in options for prefix in sequences]
            position = target
        return sequences

    def shortest_length(self, sequence: str, position: Position, depth: int) -> int:
        """Fewest presses at the top of ``depth`` directional keypads to type ``sequence``.

        ``position`` is where the arm starts on this keypad; every deeper keypad
        starts at 'A'. At depth 0 the sequence is typed directly.
        """
        if depth < 0:
            raise ValueError(f"negative depth: {depth}")
        if depth == 0:
            return len(sequence)
        if not self._on_pad(position):
            raise ValueError(f"position {position} is not on the {self.kind} keypad")
        total = 0
        current = position
        for key in sequence:
            target = self._locate(key)
            total += min(
                self._press_cost(option + "A", depth - 1)
                for option in self._options(current, target)
            )
            current = target
        return total

    def _press_cost(self, sequence: str, depth: int) -> int:
        key = (sequence, depth)
        cached = self._cache.get(key)
        if cached is None:
            cached = self.shortest_length(sequence, self.start, depth)
            self._cache[key] = cached
        return cached

    def is_valid(self, moves: str, start: Position) -> bool:
        """True if the arm never passes over the gap while following ``moves``."""
        row, col = start
        for move in moves:
            try:
                d_row, d_col = _STEPS[move]
            except KeyError:
                raise ValueError(f"not a move: {move!r}") from None
            row, col = row + d_row, col + d_col
            if not self._on_pad((row, col)):
                return False
        return True


def calculate_complexity(code: str, length: int) -> int:
    """The numeric part of the code times the length of its press sequence."""
    digits = _NON_DIGITS.sub("", code)
    if not digits:
        raise ValueError(f"code holds no digits: {code!r}")
    return length * int(digits)


def total_complexity(lines: Iterable[str], depth: int) -> int:
    """Sum of complexities of the codes typed through ``depth`` directional robots."""
    numeric = Keypad("numeric")
    directional = Keypad("directional")
    total = 0
    for line in lines:
        code = line.strip()
        if not code:
            continue
        length = min(
            directional.shortest_length(sequence, directional.start, depth)
            for sequence in numeric.shortest_instructions(code)
        )
        total += calculate_complexity(code, length)
    return total


def part_one(lines: Iterable[str]) -> int:
    return total_complexity(lines, PART_ONE_ROBOTS)


def part_two(lines: Iterable[str]) -> int:
    return total_complexity(lines, PART_TWO_ROBOTS)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum the door code complexities.")
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
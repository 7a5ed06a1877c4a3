"""Linen Layout: build towel designs out of the available towel patterns."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from advent2024.tools import read_text_file, split_string

DEFAULT_INPUT = Path("19") / "data" / "input.txt"


class _Node:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.terminal = False


class Trie:
    """A prefix tree of words."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def _find(self, text: str) -> _Node | None:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add a word."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.terminal = True

    def search(self, word: str) -> bool:
        """True if the word was inserted and not deleted."""
        node = self._find(word)
        return node is not None and node.terminal

    def starts_with(self, prefix: str) -> bool:
        """True if some path in the tree spells ``prefix``."""
        return self._find(prefix) is not None

    def delete(self, word: str) -> None:
        """Remove a word; prefixes it shares with other words stay in place."""
        node = self._find(word)
        if node is not None:
            node.terminal = False

    def words(self) -> list[str]:
        """All words, in lexicographic order."""
        return list(self._walk(self._root, ""))

    def _walk(self, node: _Node, prefix: str) -> Iterator[str]:
        if node.terminal:
            yield prefix
        for ch in sorted(node.children):
            yield from self._walk(node.children[ch], prefix + ch)

    def _match_ends(self, text: str, start: int) -> Iterator[int]:
        """End positions of the non-empty words that occur in ``text`` at ``start``."""
        node = self._root
        for position in range(start, len(text)):
            node = node.children.get(text[position])
            if node is None:
                return
            if node.terminal:
                yield position + 1

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)


def build_trie(lines: Sequence[str]) -> Trie:
    """Build the towel trie from the comma-separated first line."""
    if not lines:
        raise ValueError("the input holds no towel patterns")
    return Trie(split_string(lines[0], ", "))


def can_make_design(design: str, towels: Trie) -> bool:
    """True if the design is a concatenation of towel patterns."""
    if not design:
        return towels.search(design)
    reachable = [False] * len(design) + [True]
    for start in reversed(range(len(design))):
        reachable[start] = any(reachable[end] for end in towels._match_ends(design, start))
    return reachable[0]


def count_possible_designs(designs: Iterable[str], towels: Trie) -> int:
    """Number of designs that can be made."""
    return sum(1 for design in designs if can_make_design(design, towels))


def count_arrangements(design: str, towels: Trie) -> int:
    """Number of different ways to make the design out of towel patterns."""
    if not design:
        return 1 if towels.search(design) else 0
    ways = [0] * len(design) + [1]
    for start in reversed(range(len(design))):
        ways[start] = sum(ways[end] for end in towels._match_ends(design, start))
    return ways[0]


def count_all_arrangements(designs: Iterable[str], towels: Trie) -> int:
    """Total number of arrangements over all designs."""
    return sum(count_arrangements(design, towels) for design in designs)


def part_one(lines: Sequence[str]) -> int:
    return count_possible_designs(lines[2:], build_trie(lines))


def part_two(lines: Sequence[str]) -> int:
    return count_all_arrangements(lines[2:], build_trie(lines))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count towel arrangements.")
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
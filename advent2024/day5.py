"""Print Queue: check page updates against ordering rules and repair the bad ones."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from advent2024.tools import read_text_file, split_string

DEFAULT_INPUT = Path("5") / "data" / "input.txt"

Rules = Mapping[int, Sequence[int]]


def get_page_ordering_rules(lines: Iterable[str]) -> dict[int, list[int]]:
    """Map each page to the pages that must come after it, in the order given."""
    rules: dict[int, list[int]] = {}
    for line in lines:
        if "|" not in line:
            continue
        before, after = split_string(line, "|")[:2]
        rules.setdefault(int(before.strip()), []).append(int(after.strip()))
    return rules


def get_pages_to_produce(lines: Iterable[str]) -> list[list[int]]:
    """Parse the comma-separated page updates."""
    return [
        [int(page.strip()) for page in split_string(line, ",")]
        for line in lines
        if "," in line
    ]


def is_correctly_ordered(update: Sequence[int], rules: Rules) -> bool:
    """True if no page is preceded by a page that a rule says must follow it."""
    return not any(
        earlier in rules.get(page, ())
        for position, page in enumerate(update)
        for earlier in update[:position]
    )


def correctly_ordered_updates(updates: Iterable[Sequence[int]], rules: Rules) -> list[list[int]]:
    """The updates that already follow the rules."""
    return [list(update) for update in updates if is_correctly_ordered(update, rules)]


def incorrectly_ordered_updates(updates: Iterable[Sequence[int]], rules: Rules) -> list[list[int]]:
    """The updates that break at least one rule."""
    return [list(update) for update in updates if not is_correctly_ordered(update, rules)]


def correct_update(update: Sequence[int], rules: Rules) -> list[int]:
    """Repair an update by swapping each page with any earlier page it must precede."""
    pages = list(update)
    for current in range(len(pages)):
        if pages[current] not in rules:
            continue
        for other in range(len(pages)):
            if other == current:
                continue
            # The page at ``current`` may have changed after a swap.
            if other < current and pages[other] in rules.get(pages[current], ()):
                pages[other], pages[current] = pages[current], pages[other]
    return pages


def add_middle_page_numbers(updates: Iterable[Sequence[int]]) -> int:
    """Sum of the middle page of each update (the left one of two for even lengths)."""
    total = 0
    for update in updates:
        if not update:
            raise ValueError("an update must hold at least one page")
        total += update[(len(update) - 1) // 2]
    return total


def part_one(lines: Sequence[str]) -> int:
    rules = get_page_ordering_rules(lines)
    updates = get_pages_to_produce(lines)
    return add_middle_page_numbers(correctly_ordered_updates(updates, rules))


def part_two(lines: Sequence[str]) -> int:
    rules = get_page_ordering_rules(lines)
    updates = get_pages_to_produce(lines)
    corrected = [correct_update(update, rules) for update in incorrectly_ordered_updates(updates, rules)]
    return add_middle_page_numbers(corrected)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check page update ordering.")
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
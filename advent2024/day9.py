"""Disk Fragmenter: compact the blocks of a disk map and compute its checksum."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from advent2024.tools import is_string_digits, read_text_file

DEFAULT_INPUT = Path("9") / "data" / "input.txt"

Disk = list[int | None]


def parse_disk_map(text: str) -> list[int]:
    """Turn a dense disk map such as '12345' into its list of sizes."""
    digits = text.strip()
    if not is_string_digits(digits):
        raise ValueError(f"a disk map holds digits only: {text!r}")
    return [int(ch) for ch in digits]


def expand_disk_map(sizes: Sequence[int]) -> Disk:
    """Lay out the blocks: file ids for file blocks, None for free blocks.

    Sizes alternate between a file and the free space after it; file ids
    count up from 0.
    """
    disk: Disk = []
    for index, size in enumerate(sizes):
        if size < 0:
            raise ValueError(f"negative size in disk map: {size}")
        block = index // 2 if index % 2 == 0 else None
        disk.extend([block] * size)
    return disk


def move_file_blocks(disk: Sequence[int | None]) -> Disk:
    """Move file blocks one at a time from the end into the leftmost free block."""
    blocks = list(disk)
    left, right = 0, len(blocks) - 1
    while True:
        while left < right and blocks[left] is not None:
            left += 1
        while right > left and blocks[right] is None:
            right -= 1
        if left >= right:
            return blocks
        blocks[left], blocks[right] = blocks[right], None


def _leftmost_free_run(blocks: Disk, size: int, limit: int) -> int | None:
    """Start of the leftmost run of at least ``size`` free blocks before ``limit``."""
    run_start = None
    for index, block in enumerate(blocks[:limit]):
        if block is not None:
            run_start = None
            continue
        if run_start is None:
            run_start = index
        if index - run_start + 1 >= size:
            return run_start
    return None


def move_files(disk: Sequence[int | None]) -> Disk:
    """Move whole files, scanning from the end, into the leftmost free span that fits."""
    blocks = list(disk)
    index = len(blocks) - 1
    while index > 0:
        file_id = blocks[index]
        if file_id is None:
            index -= 1
            continue
        end = index
        start = index
        while start > 0 and blocks[start - 1] == file_id:
            start -= 1
        size = end - start + 1
        target = _leftmost_free_run(blocks, size, start)
        if target is not None:
            blocks[target:target + size] = [file_id] * size
            blocks[start:end + 1] = [None] * size
        index = start - 1
    return blocks


def checksum(disk: Sequence[int | None]) -> int:
    """Sum of position times file id over all file blocks."""
    return sum(position * block for position, block in enumerate(disk) if block is not None)


def _disk_from_lines(lines: Sequence[str]) -> Disk:
    if not lines:
        raise ValueError("the input holds no disk map")
    return expand_disk_map(parse_disk_map(lines[0]))


def part_one(lines: Sequence[str]) -> int:
    return checksum(move_file_blocks(_disk_from_lines(lines)))


def part_two(lines: Sequence[str]) -> int:
    return checksum(move_files(_disk_from_lines(lines)))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compact a disk and compute its checksum.")
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
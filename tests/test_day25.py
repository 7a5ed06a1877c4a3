import pytest

from advent2024.day25 import count_valid_combinations, get_keys, get_locks, part_one

LOCK_A = ["#####", ".####", ".####", ".####", ".#.#.", ".#...", "....."]
LOCK_B = ["#####", "##.##", ".#.##", "...##", "...#.", "...#.", "....."]
KEY_A = [".....", "#....", "#....", "#...#", "#.#.#", "#.###", "#####"]
KEY_B = [".....", ".....", "#.#..", "###..", "###.#", "###.#", "#####"]
KEY_C = [".....", ".....", ".....", "#....", "#.#..", "#.#.#", "#####"]


def join(*blocks):
    lines = []
    for block in blocks:
        if lines:
            lines.append("")
        lines.extend(block)
    return lines


EXAMPLE = join(LOCK_A, LOCK_B, KEY_A, KEY_B, KEY_C)


def test_counts_of_schematics():
    assert len(get_locks(EXAMPLE)) == 2
    assert len(get_keys(EXAMPLE)) == 3


def test_first_lock_heights():
    assert get_locks(EXAMPLE)[0] == [0, 5, 3, 4, 3]


def test_example_answer():
    assert part_one(EXAMPLE) == 3


@pytest.mark.parametrize("block", [LOCK_A, LOCK_B])
def test_flipped_lock_reads_as_key(block):
    flipped = list(reversed(block))
    assert get_keys(flipped) == get_locks(block)
    assert get_locks(flipped) == []


def test_heights_stay_within_space():
    for heights in get_keys(EXAMPLE) + get_locks(EXAMPLE):
        assert all(0 <= h <= 5 for h in heights)


def test_empty_keys_fit_every_lock():
    keys = [[0, 0, 0, 0, 0], [0, 0, 0, 0, 0]]
    locks = get_locks(EXAMPLE)
    assert count_valid_combinations(keys, locks) == len(keys) * len(locks)


def test_overlapping_pair_does_not_fit():
    assert count_valid_combinations([[5, 0]], [[1, 0]]) == 0


def test_incomplete_schematic_raises():
    with pytest.raises(ValueError):
        get_keys(KEY_A[:5])


def test_empty_input():
    assert get_keys([]) == []
    assert part_one([]) == 0
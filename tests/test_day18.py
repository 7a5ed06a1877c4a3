import pytest

from advent2024.day18 import (
    add_walls,
    empty_grid,
    first_blocking_wall,
    parse_walls,
    shortest_path_length,
)

EXAMPLE = """5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0""".splitlines()


def test_parse_walls():
    assert parse_walls(["5,4", "0,6"]) == [(5, 4), (0, 6)]


def test_parse_walls_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_walls(["54"])


def test_empty_grid_shape():
    grid = empty_grid(4, 3)
    assert grid == ["....", "....", "...."]


def test_add_walls_places_only_first_count():
    grid = add_walls(empty_grid(3, 3), [(0, 1), (2, 2)], 1)
    assert grid == ["...", "#..", "..."]


def test_add_walls_does_not_change_input():
    original = empty_grid(2, 2)
    add_walls(original, [(1, 1)], 1)
    assert original == ["..", ".."]


def test_add_walls_rejects_too_many():
    with pytest.raises(ValueError):
        add_walls(empty_grid(3, 3), [(0, 0)], 2)


def test_add_walls_rejects_outside_grid():
    with pytest.raises(ValueError):
        add_walls(empty_grid(3, 3), [(5, 0)], 1)


def test_example_shortest_path():
    assert shortest_path_length(EXAMPLE, 7, 12) == 22


def test_no_walls_shortest_path_is_corner_distance():
    assert shortest_path_length([], 5, 0) == 8


def test_blocked_grid_gives_none():
    lines = ["1,0", "1,1", "1,2"]
    assert shortest_path_length(lines, 3, 3) is None


def test_example_first_blocking_wall():
    assert first_blocking_wall(EXAMPLE, 7, 12) == (6, 1)


def test_blocking_wall_really_blocks():
    wall = first_blocking_wall(EXAMPLE, 7, 12)
    index = parse_walls(EXAMPLE).index(wall)
    assert shortest_path_length(EXAMPLE, 7, index) is not None
    assert shortest_path_length(EXAMPLE, 7, index + 1) is None


def test_no_blocking_wall_gives_none():
    assert first_blocking_wall(["2,2"], 5, 0) is None
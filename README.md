# advent2024

Solvers for a series of 2024 daily programming puzzles, in plain Python with
no runtime dependencies.

Each day has its own module (`advent2024.day2`, `advent2024.day3`, and so on).
Each exposes `part_one(lines)` and, except for day 25, `part_two(lines)`. Both
take the puzzle input as a list of lines and return the answer. Shared text
helpers such as `split_string` and `read_text_file` are in `advent2024.tools`.
A small A* grid pathfinder is in `advent2024.pathfinder`.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

Every day has a command that takes the path to a puzzle input and prints the
answers:

```
advent2024-day2 input.txt
advent2024-day17 input.txt
advent2024-day25 input.txt
```

If you give no path, the command reads `<day>/data/input.txt` relative to the
current directory, for example `2/data/input.txt`. If the file cannot be read,
the command prints an error and exits with status 1. Day 25 prints only a
part 1 answer.

These commands are available: `advent2024-day2`, `-day3`, `-day4`, `-day5`,
`-day7`, `-day8`, `-day9`, `-day16`, `-day17`, `-day18`, `-day19`, `-day20`,
`-day21`, `-day23`, `-day24` and `-day25`.

## Library use

```python
from advent2024 import day2, day19
from advent2024.tools import read_text_file

lines = read_text_file("input.txt")
print(day2.part_one(lines), day2.part_two(lines))

trie = day19.build_trie(["r, wr, b, g, bwu, rb, gb, br"])
print(day19.count_arrangements("brwrr", trie))
```

Some parts can be used on their own:

- `advent2024.pathfinder.find_path(grid, start, goal)` runs A* over a grid of
  strings in which `#` is a wall. It returns the path as a list of `(x, y)`
  positions, both ends included, or an empty list when there is no path.
- `advent2024.day17.run_program(program, a, b, c)` runs the small three-bit
  machine and returns the values it outputs, as a list of integers.
- `advent2024.day19.Trie` is a prefix tree with `insert`, `search`,
  `starts_with`, `delete` and `words`.
- `advent2024.day21.Keypad("numeric")` and `Keypad("directional")` work out
  the shortest button sequences through chains of keypads.
- `advent2024.day23.find_maximal_cliques(graph)` lists the maximal cliques of
  an undirected graph.

## What is not included

The package has solvers only for days 2, 3, 4, 5, 7, 8, 9, 16, 17, 18, 19, 20,
21, 23, 24 and 25. It has no modules or commands for any other day.
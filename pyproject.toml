[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2024"
version = "0.1.0"
description = "Solvers for a set of 2024 daily programming puzzles: grids, pathfinding, tries, circuits and a small virtual machine."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "pathfinding", "a-star", "trie", "graph", "cliques"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent2024-day2 = "advent2024.day2:main"
advent2024-day3 = "advent2024.day3:main"
advent2024-day4 = "advent2024.day4:main"
advent2024-day5 = "advent2024.day5:main"
advent2024-day7 = "advent2024.day7:main"
advent2024-day8 = "advent2024.day8:main"
advent2024-day9 = "advent2024.day9:main"
advent2024-day16 = "advent2024.day16:main"
advent2024-day17 = "advent2024.day17:main"
advent2024-day18 = "advent2024.day18:main"
advent2024-day19 = "advent2024.day19:main"
advent2024-day20 = "advent2024.day20:main"
advent2024-day21 = "advent2024.day21:main"
advent2024-day23 = "advent2024.day23:main"
advent2024-day24 = "advent2024.day24:main"
advent2024-day25 = "advent2024.day25:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2024"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

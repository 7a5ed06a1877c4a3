"""Solvers for a series of 2024 daily programming puzzles, with shared helpers and an A* grid pathfinder."""

__version__ = "0.1.0"
"""Solvers for five 2018 Advent of Code puzzles and a small grid helper."""

__version__ = "0.1.0"
__all__ = ["grid", "day07", "day09", "day13", "day14", "day15"]
"""Marble Mania: the elves' marble game."""

import argparse
import sys
from collections import deque


def _play(players, last_marble):
    circle = deque([0])
    scores = [0] * players
    for marble in range(1, last_marble + 1):
        if marble % 23 == 0:
            circle.rotate(-7)
            scores[marble % players] += marble + circle.popleft()
            circle.rotate(1)
        else:
            circle.rotate(1)
            circle.appendleft(marble)
    return max(scores)


class Puzzle:
    """A game described by its number of players and its last marble."""

    def __init__(self, text):
        words = text.split()
        if len(words) < 2:
            raise ValueError("expected the number of players and the last marble")
        self.players = int(words[0])
        self.last_marble = int(words[-2])
        if self.players < 1:
            raise ValueError("there must be at least one player")

    def part1(self):
        """The winning score."""
        return _play(self.players, self.last_marble)

    def part2(self):
        """The winning score with a last marble a hundred times larger."""
        return _play(self.players, self.last_marble * 100)


def main(argv=None):
    """Print both answers for the puzzle input."""
    parser = argparse.ArgumentParser(description="Solve day 9.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    puzzle = Puzzle(text)
    print(f"Part 1: {puzzle.part1()}")
    print(f"Part 2: {puzzle.part2()}")
    return 0
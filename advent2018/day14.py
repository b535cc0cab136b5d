"""Chocolate Charts: the elves' recipe scoreboard."""

import argparse
import sys


def sequence(text):
    """The decimal digits of ``text``, ignoring anything else."""
    return [int(c) for c in text.strip() if c.isdigit()]


def _step(scores, first, second):
    """Append the new recipes and return the elves' new positions."""
    total = scores[first] + scores[second]
    scores.extend(divmod(total, 10) if total >= 10 else (total,))
    first = (first + 1 + scores[first]) % len(scores)
    second = (second + 1 + scores[second]) % len(scores)
    return first, second


def part1(n):
    """The ten scores that follow the first ``n`` recipes."""
    scores = [3, 7]
    first, second = 0, 1
    while len(scores) < n + 10:
        first, second = _step(scores, first, second)
    return "".join(str(d) for d in scores[n : n + 10])


def part2(seq):
    """How many recipes appear before ``seq`` first shows up on the scoreboard."""
    target = list(seq)
    n = len(target)
    scores = [3, 7]
    first, second = 0, 1
    while True:
        total = scores[first] + scores[second]
        # The sequence may end on either of the (up to) two new digits.
        for digit in divmod(total, 10) if total >= 10 else (total,):
            scores.append(digit)
            if len(scores) >= n and scores[len(scores) - n :] == target:
                return len(scores) - n
        first = (first + 1 + scores[first]) % len(scores)
        second = (second + 1 + scores[second]) % len(scores)


def main(argv=None):
    """Print both answers for the puzzle input."""
    parser = argparse.ArgumentParser(description="Solve day 14.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    print(f"Part 1: {part1(int(text.strip()))}")
    print(f"Part 2: {part2(sequence(text))}")
    return 0
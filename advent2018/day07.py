"""The Sum of Its Parts: ordering steps with dependencies."""

import argparse
import sys
from dataclasses import dataclass


@dataclass
class Task:
    """A step being worked on, with the seconds of work it still needs."""

    job: str
    time: int

    def tick(self):
        """Spend one second of work on the task."""
        if self.time <= 0:
            raise ValueError(f"task {self.job} is already done")
        self.time -= 1

    def is_done(self):
        """Whether no work remains."""
        return self.time == 0


class Puzzle:
    """Steps and the steps each one waits on, kept in alphabetical order."""

    def __init__(self, text):
        dependent = {}
        for line in text.splitlines():
            words = line.split()
            if not words:
                continue
            before = words[1][0]
            after = words[-3][0]
            dependent.setdefault(after, []).append(before)
            dependent.setdefault(before, [])
        self.dependent = dict(sorted(dependent.items()))

    def _available(self, completed, in_progress=()):
        return next(
            (
                step
                for step, before in self.dependent.items()
                if step not in completed
                and step not in in_progress
                and all(b in completed for b in before)
            ),
            None,
        )

    def part1(self):
        """The order in which the steps are completed by one worker."""
        completed = []
        while len(completed) < len(self.dependent):
            step = self._available(completed)
            if step is None:
                raise ValueError("the steps have a circular dependency")
            completed.append(step)
        return "".join(completed)

    def part2(self, workers=5, base_time=60):
        """Seconds taken to finish every step with several workers."""
        completed = []
        tasks = []
        second = 0
        total = len(self.dependent)

        while len(completed) < total:
            second += 1

            remaining = []
            for task in tasks:
                task.tick()
                if task.is_done():
                    completed.append(task.job)
                else:
                    remaining.append(task)
            tasks = remaining

            while len(tasks) < workers:
                step = self._available(completed, {task.job for task in tasks})
                if step is None:
                    break
                duration = base_time + ord(step) - ord("A") + 1
                tasks.append(Task(step, duration))

            if not tasks and len(completed) < total:
                raise ValueError("the steps have a circular dependency")

        # Nothing is worked on during the first second.
        return second - 1


def _read_input(argv, default_name):
    parser = argparse.ArgumentParser(description=f"Solve {default_name}.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        return sys.stdin.read()
    with open(args.input, encoding="utf-8") as handle:
        return handle.read()


def main(argv=None):
    """Print both answers for the puzzle input."""
    puzzle = Puzzle(_read_input(argv, "day 7"))
    print(f"Part 1: {puzzle.part1()}")
    print(f"Part 2: {puzzle.part2()}")
    return 0
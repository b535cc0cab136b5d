"""Beverage Bandits: elves and goblins fighting in a cave."""

import argparse
import heapq
import sys
import time
from dataclasses import dataclass

WALL = "#"
EMPTY = "."
ELF = "E"
GOBLIN = "G"

_READING_ORDER = ((-1, 0), (1, 0), (0, -1), (0, 1))
_STEP_ORDER = ((-1, 0), (0, -1), (0, 1), (1, 0))


def is_adjacent(a, b):
    """Whether two ``(row, col)`` positions are orthogonal neighbours."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


@dataclass(frozen=True)
class GameResult:
    """Which side won (``"E"`` or ``"G"``) and the battle's outcome."""

    winner: str
    outcome: int

    @property
    def elves_win(self):
        return self.winner == ELF


@dataclass
class Unit:
    """An elf or a goblin and its hit points."""

    kind: str
    hp: int = 200

    def attack(self, power):
        """Take a hit of ``power``; return the hit points left, never below zero."""
        self.hp = max(self.hp - power, 0)
        return self.hp

    def is_enemy_of(self, other):
        return isinstance(other, Unit) and other.kind != self.kind

    def __str__(self):
        return self.kind


def _parse_cell(symbol):
    if symbol in (WALL, EMPTY):
        return symbol
    if symbol in (ELF, GOBLIN):
        return Unit(symbol)
    raise ValueError(f"unexpected symbol {symbol!r}")


class Puzzle:
    """The cave: a grid of walls, open floor and units, indexed ``(row, col)``."""

    def __init__(self, text):
        lines = text.splitlines()
        if not lines:
            raise ValueError("the cave map is empty")
        self.rows = len(lines)
        self.cols = len(lines[0])
        if any(len(line) != self.cols for line in lines):
            raise ValueError("every row of the cave must have the same width")
        self.cells = [[_parse_cell(symbol) for symbol in line] for line in lines]

    def _cell(self, position):
        row, col = position
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.cells[row][col]
        return None

    def _is_empty(self, position):
        return self._cell(position) == EMPTY

    def _positions(self):
        return ((r, c) for r in range(self.rows) for c in range(self.cols))

    def targets(self, origin):
        """Positions of every enemy of the unit at ``origin``, in reading order."""
        unit = self._cell(origin)
        if not isinstance(unit, Unit):
            return []
        return [p for p in self._positions() if unit.is_enemy_of(self._cell(p))]

    def in_range(self, targets):
        """Open squares next to any of ``targets``, without repeats."""
        squares = []
        for row, col in targets:
            for dr, dc in _READING_ORDER:
                candidate = (row + dr, col + dc)
                if self._is_empty(candidate) and candidate not in squares:
                    squares.append(candidate)
        return squares

    def reachable_nearest_choose(self, origin, ranges):
        """The nearest of ``ranges`` reachable from ``origin``, ties in reading order.

        Returns None when none of them can be reached.
        """
        wanted = set(ranges)
        discovered = {origin}
        frontier = [(0, origin)]
        while frontier:
            distance, position = heapq.heappop(frontier)
            if position in wanted:
                return position
            row, col = position
            for dr, dc in _READING_ORDER:
                candidate = (row + dr, col + dc)
                if self._is_empty(candidate) and candidate not in discovered:
                    discovered.add(candidate)
                    heapq.heappush(frontier, (distance + 1, candidate))
        return None

    def next_step(self, origin, destination):
        """The first step from ``origin`` on a shortest path to ``destination``."""
        options = []
        for dr, dc in _STEP_ORDER:
            candidate = (origin[0] + dr, origin[1] + dc)
            if not self._is_empty(candidate):
                continue
            distance = self.bfs(candidate, destination)
            if distance is not None:
                options.append((distance, candidate))
        if not options:
            raise ValueError(f"no path from {origin} to {destination}")
        shortest = min(distance for distance, _ in options)
        return next(position for distance, position in options if distance == shortest)

    def bfs(self, origin, destination):
        """Length of the shortest path over open floor, or None if there is none."""
        discovered = {origin}
        frontier = [(0, origin)]
        while frontier:
            distance, position = heapq.heappop(frontier)
            if position == destination:
                return distance
            row, col = position
            for dr, dc in _READING_ORDER:
                candidate = (row + dr, col + dc)
                if candidate not in discovered and self._is_empty(candidate):
                    discovered.add(candidate)
                    heapq.heappush(frontier, (distance + 1, candidate))
        return None

    def _swap(self, a, b):
        (ar, ac), (br, bc) = a, b
        self.cells[ar][ac], self.cells[br][bc] = self.cells[br][bc], self.cells[ar][ac]

    def round(self, elf_attack_power):
        """Play one round; return False if a unit found no enemies left."""
        units = [p for p in self._positions() if isinstance(self._cell(p), Unit)]

        for position in units:
            # Killed units leave open floor behind.
            if self._is_empty(position):
                continue

            targets = self.targets(position)
            if not targets:
                return False

            if not any(is_adjacent(position, t) for t in targets):
                destination = self.reachable_nearest_choose(position, self.in_range(targets))
                if destination is None:
                    continue
                step = self.next_step(position, destination)
                self._swap(position, step)
                position = step

            adjacent = [t for t in targets if is_adjacent(position, t)]
            if not adjacent:
                continue
            _, victim = min((self._cell(t).hp, t) for t in adjacent)
            attacker = self._cell(position)
            power = elf_attack_power if attacker.kind == ELF else 3
            if self._cell(victim).attack(power) == 0:
                self.cells[victim[0]][victim[1]] = EMPTY
        return True

    def battle(self, elf_attack_power):
        """Fight until one side is gone and report the result."""
        rounds = 0
        while self.round(elf_attack_power):
            rounds += 1
        survivors = [cell for row in self.cells for cell in row if isinstance(cell, Unit)]
        hp = sum(unit.hp for unit in survivors)
        kinds = {unit.kind for unit in survivors}
        if len(kinds) != 1:
            raise RuntimeError("the battle ended without a single winning side")
        return GameResult(kinds.pop(), rounds * hp)

    def elf_count(self):
        """Number of elves still alive."""
        return sum(
            1 for row in self.cells for cell in row if isinstance(cell, Unit) and cell.kind == ELF
        )

    def __str__(self):
        return "".join("".join(str(cell) for cell in row) + "\n" for row in self.cells)


def part1(text):
    """Outcome of the battle with elves at normal strength."""
    return Puzzle(text).battle(3).outcome


def part2(text):
    """Outcome of the battle at the lowest elf power that loses no elf."""
    elves = text.count(ELF)
    low, high = 0, 100
    while True:
        if low + 1 == high:
            low = high
        power = (low + high) // 2
        puzzle = Puzzle(text)
        result = puzzle.battle(power)
        if result.elves_win and puzzle.elf_count() == elves:
            high = power
        else:
            low = power
        if low == high:
            return result.outcome


def main(argv=None):
    """Print both answers for the puzzle input."""
    parser = argparse.ArgumentParser(description="Solve day 15.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    start = time.perf_counter()
    print(f"Part 1: {part1(text)}")
    print(f"Part 2: {part2(text)}")
    print(f"Time: {time.perf_counter() - start:.3f}s")
    return 0
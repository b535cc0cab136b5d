"""Mine Cart Madness: carts running on a network of tracks."""

import argparse
import sys
from dataclasses import dataclass
from enum import Enum


class Track(Enum):
    """A piece of track, valued by the symbol that draws it."""

    VERTICAL = "|"
    HORIZONTAL = "-"
    TURN_SW = "\\"
    TURN_SE = "/"
    INTERSECTION = "+"

    def __str__(self):
        return self.value


class Decision(Enum):
    """The way a cart goes at its next intersection."""

    LEFT = "left"
    STRAIGHT = "straight"
    RIGHT = "right"

    def following(self):
        """The decision taken at the intersection after this one."""
        return _NEXT_DECISION[self]


_NEXT_DECISION = {
    Decision.LEFT: Decision.STRAIGHT,
    Decision.STRAIGHT: Decision.RIGHT,
    Decision.RIGHT: Decision.LEFT,
}

_CART_SYMBOLS = {
    "v": ((0, 1), Track.VERTICAL),
    "^": ((0, -1), Track.VERTICAL),
    "<": ((-1, 0), Track.HORIZONTAL),
    ">": ((1, 0), Track.HORIZONTAL),
}

_DIRECTION_SYMBOLS = {velocity: symbol for symbol, (velocity, _) in _CART_SYMBOLS.items()}


@dataclass
class Cart:
    """A cart's position ``(x, y)``, velocity and next turning decision.

    The y axis points down, as in the puzzle's drawing.
    """

    position: tuple
    velocity: tuple
    next_decision: Decision = Decision.LEFT

    def tick(self, tracks):
        """Move one step along ``tracks`` and turn as the track there demands."""
        x, y = self.position
        dx, dy = self.velocity
        self.position = (x + dx, y + dy)
        track = tracks.get(self.position)
        if track is None:
            raise ValueError(f"not on the rails: ({self.position[0]},{self.position[1]})")
        if track is Track.VERTICAL:
            if dx != 0 or abs(dy) != 1:
                raise ValueError(f"cart moving sideways on vertical track at {self.position}")
        elif track is Track.HORIZONTAL:
            if abs(dx) != 1 or dy != 0:
                raise ValueError(f"cart moving vertically on horizontal track at {self.position}")
        elif track is Track.TURN_SE:
            self.velocity = (-dy, -dx)
        elif track is Track.TURN_SW:
            self.velocity = (dy, dx)
        else:
            if self.next_decision is Decision.LEFT:
                self.velocity = (dy, -dx)
            elif self.next_decision is Decision.RIGHT:
                self.velocity = (-dy, dx)
            self.next_decision = self.next_decision.following()


class Puzzle:
    """The track layout and the carts running on it."""

    def __init__(self, text):
        self.carts = []
        self.tracks = {}
        for y, line in enumerate(text.splitlines()):
            for x, symbol in enumerate(line):
                position = (x, y)
                if symbol == " ":
                    continue
                if symbol in _CART_SYMBOLS:
                    velocity, track = _CART_SYMBOLS[symbol]
                    self.carts.append(Cart(position, velocity))
                    self.tracks[position] = track
                else:
                    try:
                        self.tracks[position] = Track(symbol)
                    except ValueError:
                        raise ValueError(f"unexpected symbol {symbol!r} at {position}") from None

    def __str__(self):
        if not self.tracks:
            return ""
        rows = max(y for _, y in self.tracks)
        cols = max(x for x, _ in self.tracks)
        lines = []
        for y in range(rows + 1):
            cells = []
            for x in range(cols + 1):
                position = (x, y)
                cart = next((c for c in self.carts if c.position == position), None)
                if cart is not None:
                    cells.append(_DIRECTION_SYMBOLS[cart.velocity])
                else:
                    track = self.tracks.get(position)
                    cells.append(" " if track is None else str(track))
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def part1(self):
        """Run whole ticks until a tick ends with a crash; return the crash sites."""
        if len(self.carts) < 2:
            raise ValueError("at least two carts are needed for a crash")
        crash_sites = []
        while True:
            # Carts move in reading order: top to bottom, then left to right.
            self.carts.sort(key=lambda cart: (cart.position[1], cart.position[0]))
            for cart in self.carts:
                if cart.position in crash_sites:
                    continue
                cart.tick(self.tracks)
                for other in self.carts:
                    if other is not cart and other.position == cart.position:
                        crash_sites.append(cart.position)
            if crash_sites:
                return crash_sites

    def part2(self):
        """Remove crashed carts until one is left; return its position."""
        while len(self.carts) > 1:
            crash_sites = self.part1()
            self.carts = [cart for cart in self.carts if cart.position not in crash_sites]
        if len(self.carts) != 1:
            raise ValueError("no cart survives")
        return self.carts[0].position


def _read_input(argv):
    parser = argparse.ArgumentParser(description="Solve day 13.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        return sys.stdin.read()
    with open(args.input, encoding="utf-8") as handle:
        return handle.read()


def main(argv=None):
    """Print both answers and the final state of the tracks."""
    text = _read_input(argv)
    first_x, first_y = Puzzle(text).part1()[0]
    print(f"Part 1: {first_x},{first_y}")
    puzzle = Puzzle(text)
    last_x, last_y = puzzle.part2()
    print(f"Part 2: {last_x},{last_y}")
    print(puzzle)
    return 0
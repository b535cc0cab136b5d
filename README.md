# advent2018

Solvers for five puzzles from the 2018 Advent of Code, each one available
both as an importable module and as a command.

| Command            | Module              | Puzzle                    |
|--------------------|---------------------|---------------------------|
| `advent2018-day07` | `advent2018.day07`  | The Sum of Its Parts      |
| `advent2018-day09` | `advent2018.day09`  | Marble Mania              |
| `advent2018-day13` | `advent2018.day13`  | Mine Cart Madness         |
| `advent2018-day14` | `advent2018.day14`  | Chocolate Charts          |
| `advent2018-day15` | `advent2018.day15`  | Beverage Bandits          |

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line use

Each command takes the path of a puzzle input file as its only argument. With
no argument it reads the input from standard input.

```
advent2018-day09 day09.txt
advent2018-day07 < day07.txt
```

Every command prints its answers as:

```
Part 1: ...
Part 2: ...
```

A few commands print a little more:

- `advent2018-day13` prints each answer as `x,y` and then draws the tracks
  with the last surviving cart on them.
- `advent2018-day15` prints the time both parts took, in seconds.
- `advent2018-day14` reads the input as a number for part 1 and as a
  sequence of digits for part 2.

## Library use

```python
from advent2018.day09 import Puzzle

Puzzle("9 players; last marble is worth 25 points").part1()   # 32
```

```python
from advent2018 import day14

day14.part1(9)                   # "5158916779"
day14.part2([5, 1, 5, 8, 9])     # 9
day14.sequence("51589\n")        # [5, 1, 5, 8, 9]
```

- `advent2018.day07.Puzzle(text)` reads lines of the form
  `Step C must be finished before step A can begin.` `part1()` returns the
  order one worker completes the steps in; `part2(workers=5, base_time=60)`
  returns the seconds a team needs, each step taking `base_time` plus its
  letter's position in the alphabet. A circular dependency raises
  `ValueError`.
- `advent2018.day09.Puzzle(text)` reads the player count and last marble;
  `part1()` is the winning score and `part2()` the winning score with a last
  marble a hundred times larger.
- `advent2018.day13.Puzzle(text)` parses the track map into `tracks` and
  `carts` (`Cart` objects with `(x, y)` positions and velocities, y pointing
  down). `part1()` runs until a tick ends in a crash and returns the list of
  crash sites; `part2()` removes crashed carts until one is left and returns
  its position. `str(puzzle)` draws the current state.
- `advent2018.day15.Puzzle(text)` holds the cave as rows of cells, with
  `Unit` objects for elves and goblins. `battle(elf_attack_power)` returns a
  `GameResult` with `winner` (`"E"` or `"G"`), `outcome` and `elves_win`.
  `round`, `targets`, `in_range`, `reachable_nearest_choose`, `next_step`,
  `bfs` and `elf_count` expose the individual steps of the simulation.
  `part1(text)` gives the outcome at normal attack power and `part2(text)`
  the outcome at the lowest elf attack power found to win without losing an
  elf.
- `advent2018.grid.nsew(x, y)` lists the four neighbours of a grid cell,
  clamped at zero.

## What it does not do

The package does not download puzzle inputs or submit answers: you supply
your own input file, and the commands only print the results.
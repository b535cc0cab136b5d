import pytest

from advent2018.day15 import GameResult, Puzzle, Unit, is_adjacent, part1, part2

BASIC_2 = "#######\n#.E...#\n#.....#\n#...G.#\n#######"
NOTHING_IN_RANGE = "#######\n#E##..#\n####..#\n#....G#\n#######"
NOTHING_AT_ALL = "#######\n#E##..#\n####..#\n#.....#\n#######"
DUEL = "####\n#EG#\n####"
CORRIDOR = "#######\n#E...G#\n#######"


def test_basic_2_next_step():
    p = Puzzle(BASIC_2)
    origin = (1, 2)
    r = p.in_range(p.targets(origin))
    s = p.reachable_nearest_choose(origin, r)
    assert p.next_step(origin, s) == (1, 3)


def test_basic_2_targets_and_ranges():
    p = Puzzle(BASIC_2)
    t = p.targets((1, 2))
    assert t == [(3, 4)]
    assert p.in_range(t) == [(2, 4), (3, 3), (3, 5)]
    assert p.reachable_nearest_choose((1, 2), p.in_range(t)) == (2, 4)


def test_nothing_in_range():
    p = Puzzle(NOTHING_IN_RANGE)
    r = p.in_range(p.targets((1, 1)))
    assert p.reachable_nearest_choose((1, 1), r) is None


def test_nothing_at_all():
    p = Puzzle(NOTHING_AT_ALL)
    t = p.targets((1, 1))
    assert t == []
    r = p.in_range(t)
    assert r == []
    assert p.reachable_nearest_choose((1, 1), r) is None


def test_bfs():
    p = Puzzle(BASIC_2)
    assert p.bfs((1, 1), (3, 5)) == 6
    assert p.bfs((1, 1), (0, 0)) is None


def test_next_step_without_path_raises():
    p = Puzzle(NOTHING_IN_RANGE)
    with pytest.raises(ValueError):
        p.next_step((1, 1), (3, 1))


def test_in_range_has_no_repeats():
    p = Puzzle("#####\n#G.G#\n#.E.#\n#####")
    assert p.in_range(p.targets((2, 2))) == [(2, 1), (1, 2), (2, 3)]


def test_is_adjacent():
    assert is_adjacent((1, 1), (1, 2))
    assert is_adjacent((2, 1), (1, 1))
    assert not is_adjacent((1, 1), (2, 2))
    assert not is_adjacent((1, 1), (1, 1))


def test_unit_attack_floors_at_zero():
    unit = Unit("G", hp=5)
    assert unit.attack(3) == 2
    assert unit.attack(3) == 0
    assert unit.hp == 0


def test_corridor_rounds():
    p = Puzzle(CORRIDOR)
    assert p.round(3)
    assert str(p) == "#######\n#.E.G.#\n#######\n"
    assert p.round(3)
    assert str(p) == "#######\n#..EG.#\n#######\n"
    assert p.cells[1][4].hp == 197
    assert p.cells[1][3].hp == 197


def test_duel_battle():
    assert Puzzle(DUEL).battle(3) == GameResult("E", 134)


def test_duel_goblins_win_without_elf_power():
    result = Puzzle(DUEL).battle(0)
    assert result == GameResult("G", 13400)
    assert not result.elves_win


def test_elf_count():
    p = Puzzle(DUEL)
    assert p.elf_count() == 1
    p.battle(0)
    assert p.elf_count() == 0


def test_part1_and_part2():
    assert part1(DUEL) == 134
    assert part2(DUEL) == 134


def test_str_round_trip():
    assert str(Puzzle(BASIC_2)) == BASIC_2 + "\n"


def test_bad_symbol():
    with pytest.raises(ValueError):
        Puzzle("#x#")


def test_ragged_rows():
    with pytest.raises(ValueError):
        Puzzle("###\n#E#G#")
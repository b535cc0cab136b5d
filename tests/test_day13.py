import pytest

from advent2018.day13 import Cart, Decision, Puzzle, Track, main

SAMPLE1 = "\n".join(
    [
        "/->-\\        ",
        "|   |  /----\\",
        "| /-+--+-\\  |",
        "| | |  | v  |",
        "\\-+-/  \\-+--/",
        "  \\------/   ",
    ]
)

SAMPLE2 = "\n".join(
    [
        "/>-<\\  ",
        "|   |  ",
        "| /<+-\\",
        "| | | v",
        "\\>+</ |",
        "  |   ^",
        "  \\<->/",
    ]
)


def test_first_crash_sample1():
    assert Puzzle(SAMPLE1).part1() == [(7, 3)]


def test_last_cart_sample2():
    assert Puzzle(SAMPLE2).part2() == (6, 4)


def test_carts_move_in_reading_order():
    text = "|\nv\n|\n^\n|"
    assert Puzzle(text).part1() == [(0, 2)]


def test_intersection_decisions_cycle():
    tracks = {(1, 0): Track.INTERSECTION, (2, 0): Track.INTERSECTION}
    cart = Cart((0, 0), (1, 0))
    cart.tick(tracks)
    assert cart.position == (1, 0)
    assert cart.velocity == (0, -1)
    assert cart.next_decision is Decision.STRAIGHT

    cart = Cart((0, 0), (1, 0), Decision.RIGHT)
    cart.tick(tracks)
    assert cart.velocity == (0, 1)
    assert cart.next_decision is Decision.LEFT

    cart = Cart((0, 0), (1, 0), Decision.STRAIGHT)
    cart.tick(tracks)
    assert cart.velocity == (1, 0)
    assert cart.next_decision is Decision.RIGHT


@pytest.mark.parametrize(
    "track, velocity, expected",
    [
        (Track.TURN_SE, (1, 0), (0, -1)),
        (Track.TURN_SE, (0, 1), (-1, 0)),
        (Track.TURN_SW, (1, 0), (0, 1)),
        (Track.TURN_SW, (0, -1), (-1, 0)),
    ],
)
def test_curves(track, velocity, expected):
    start = (5, 5)
    target = (start[0] + velocity[0], start[1] + velocity[1])
    cart = Cart(start, velocity)
    cart.tick({target: track})
    assert cart.position == target
    assert cart.velocity == expected


def test_off_the_rails_raises():
    cart = Cart((0, 0), (1, 0))
    with pytest.raises(ValueError, match="not on the rails"):
        cart.tick({})


def test_wrong_direction_on_straight_track_raises():
    cart = Cart((0, 0), (1, 0))
    with pytest.raises(ValueError):
        cart.tick({(1, 0): Track.VERTICAL})


def test_unexpected_symbol_raises():
    with pytest.raises(ValueError, match="unexpected symbol"):
        Puzzle("|x|")


def test_parsing_places_track_under_carts():
    puzzle = Puzzle(SAMPLE1)
    assert len(puzzle.carts) == 2
    assert puzzle.tracks[(2, 0)] is Track.HORIZONTAL
    assert puzzle.tracks[(9, 3)] is Track.VERTICAL
    assert puzzle.tracks[(4, 2)] is Track.INTERSECTION


def test_str_draws_tracks_and_carts():
    text = "/->-\\\n|   |\n\\---/"
    assert str(Puzzle(text)) == text + "\n"


def test_part2_with_even_carts_and_no_survivor_raises():
    with pytest.raises(ValueError):
        Puzzle("->-<-").part2()


def test_part1_single_cart_raises():
    with pytest.raises(ValueError):
        Puzzle("/>\\\n\\-/").part1()


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE2, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Part 1: 2,0" in out
    assert "Part 2: 6,4" in out
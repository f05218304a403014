import pytest

from raycaster.mapgrid import (
    Player,
    check_map_chars,
    check_map_closed,
    find_player,
    parse_map,
)

CLOSED = [
    "11111",
    "10N01",
    "10001",
    "11111",
]


def test_parse_map_pads_rows_and_skips_blank_lines():
    grid = parse_map(["111\n", "1N1\r\n", "  \n", "11111\n"])
    assert grid == ["111  ", "1N1  ", "11111"]


def test_parse_map_rows_share_width():
    grid = parse_map(["1\n", "1111\n", "11\n"])
    assert {len(row) for row in grid} == {len("1111")}


def test_parse_map_cuts_at_carriage_return():
    grid = parse_map(["10\r01\n"])
    assert grid == ["10"]


def test_parse_map_empty_input():
    assert parse_map(["\n", " \t\n"]) == []


def test_check_map_chars_accepts_valid_map():
    assert check_map_chars(CLOSED) is True


def test_check_map_chars_rejects_unknown_char():
    assert check_map_chars(["111", "1X1", "111"]) is False


@pytest.mark.parametrize("ch", ["2", "D"])
def test_bonus_chars_only_allowed_in_bonus(ch):
    grid = ["111", f"1{ch}1", "111"]
    assert check_map_chars(grid) is False
    assert check_map_chars(grid, bonus=True) is True


def test_closed_map_is_closed():
    assert check_map_closed(CLOSED) is True


def test_walkable_on_edge_is_open():
    assert check_map_closed(["10111", "10001", "11111"]) is False


def test_walkable_next_to_space_is_open():
    grid = ["11111", "10 01", "10001", "11111"]
    assert check_map_closed(grid) is False


def test_door_on_edge_only_open_in_bonus():
    grid = ["1D1", "101", "111"]
    assert check_map_closed(grid) is False
    grid = ["1D1", "111", "111"]
    assert check_map_closed(grid) is True
    assert check_map_closed(grid, bonus=True) is False


def test_find_player_position_and_direction():
    player = find_player(CLOSED)
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(1.5)
    assert player.direction == "N"
    assert (player.dir_x, player.dir_y) == (0.0, -1.0)
    assert player.plane_x == pytest.approx(0.66)


def test_find_player_rejects_two_players():
    with pytest.raises(ValueError):
        find_player(["111", "NS1", "111"])


def test_find_player_rejects_no_player():
    with pytest.raises(ValueError):
        find_player(["111", "101", "111"])


@pytest.mark.parametrize(
    "direction, expected",
    [
        ("N", (0.0, -1.0, 0.66, 0.0)),
        ("S", (0.0, 1.0, -0.66, 0.0)),
        ("W", (-1.0, 0.0, 0.0, -0.66)),
        ("E", (1.0, 0.0, 0.0, 0.66)),
    ],
)
def test_player_facing(direction, expected):
    player = Player.facing(1.5, 2.5, direction)
    got = (player.dir_x, player.dir_y, player.plane_x, player.plane_y)
    assert got == pytest.approx(expected)
    assert (player.x, player.y) == (1.5, 2.5)


def test_player_facing_rejects_unknown_direction():
    with pytest.raises(ValueError):
        Player.facing(1.0, 1.0, "Q")
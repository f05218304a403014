import math
from dataclasses import replace

import pytest

from raycaster.mapgrid import Player
from raycaster.movement import (
    interact_door,
    mouse_rotate,
    move_backward,
    move_forward,
    move_left,
    move_right,
    rotate_left,
    rotate_player,
    rotate_right,
)

ROOM = [
    "11111",
    "10001",
    "10001",
    "10001",
    "11111",
]


def test_move_forward_north_steps_by_speed():
    player = Player.facing(2.5, 2.5, "N")
    move_forward(player, ROOM)
    assert player.y == pytest.approx(2.4)
    assert player.x == pytest.approx(2.5)


def test_forward_then_backward_returns():
    player = Player.facing(2.5, 2.5, "E")
    move_forward(player, ROOM)
    move_backward(player, ROOM)
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(2.5)


def test_wall_blocks_forward():
    player = Player.facing(1.5, 1.25, "N")
    move_forward(player, ROOM)
    assert player.y == 1.25


def test_door_blocks_movement():
    grid = ["11111", "1D001", "10001", "11111"]
    player = Player.facing(2.25, 1.5, "W")
    move_forward(player, grid)
    assert player.x == 2.25


def test_strafe_left_and_right_when_facing_north():
    player = Player.facing(2.5, 2.5, "N")
    move_left(player, ROOM)
    assert player.x < 2.5
    move_right(player, ROOM)
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(2.5)


def test_rotate_left_then_right_restores():
    player = Player.facing(2.5, 2.5, "S")
    original = replace(player)
    rotate_left(player)
    assert player.dir_x != pytest.approx(original.dir_x)
    rotate_right(player)
    assert player.dir_x == pytest.approx(original.dir_x)
    assert player.dir_y == pytest.approx(original.dir_y)
    assert player.plane_x == pytest.approx(original.plane_x)
    assert player.plane_y == pytest.approx(original.plane_y)


def test_quarter_turn_from_north_faces_east():
    player = Player.facing(2.5, 2.5, "N")
    east = Player.facing(2.5, 2.5, "E")
    rotate_player(player, math.pi / 2)
    assert (player.dir_x, player.dir_y) == pytest.approx((east.dir_x, east.dir_y))
    assert (player.plane_x, player.plane_y) == pytest.approx((east.plane_x, east.plane_y))


def test_rotation_preserves_direction_length():
    player = Player.facing(2.5, 2.5, "W")
    for _ in range(17):
        rotate_right(player)
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1.0)


def test_mouse_at_centre_does_nothing():
    player = Player.facing(2.5, 2.5, "N")
    assert mouse_rotate(player, 512, 1024) is False
    assert (player.dir_x, player.dir_y) == (0.0, -1.0)


def test_mouse_off_centre_rotates():
    player = Player.facing(2.5, 2.5, "N")
    expected = Player.facing(2.5, 2.5, "N")
    rotate_player(expected, 100 * 0.002)
    assert mouse_rotate(player, 612, 1024) is True
    assert player.dir_x == pytest.approx(expected.dir_x)
    assert player.dir_y == pytest.approx(expected.dir_y)


def test_door_opens_and_closes():
    grid = ["11111", "10D01", "10001", "11111"]
    player = Player.facing(2.5, 2.5, "N")
    assert interact_door(player, grid) is True
    assert grid[1] == "10O01"
    assert interact_door(player, grid) is True
    assert grid[1] == "10D01"


def test_door_not_closed_on_player():
    grid = ["11111", "10001", "100O1", "11111"]
    player = Player(x=3.05, y=2.05, dir_x=0.7, dir_y=0.7)
    assert interact_door(player, grid) is False
    assert grid[2] == "100O1"


def test_interact_without_door_leaves_grid():
    grid = list(ROOM)
    player = Player.facing(2.5, 2.5, "N")
    assert interact_door(player, grid) is False
    assert grid == ROOM
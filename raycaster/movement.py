"""Player movement, rotation and door interaction."""

from __future__ import annotations

import math

from .mapgrid import Player

MOVE_SPEED = 0.1
COLLISION_BUFFER = 0.2
ROT_SPEED = 0.05
MOUSE_SENSITIVITY = 0.002

_BLOCKING = frozenset("1D")


def _cell(grid: list[str], x: int, y: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return " "


def _width(grid: list[str]) -> int:
    return max((len(row) for row in grid), default=0)


def _step(player: Player, grid: list[str], dx: float, dy: float) -> None:
    new_x = player.x + dx * MOVE_SPEED
    new_y = player.y + dy * MOVE_SPEED
    check_x = new_x + COLLISION_BUFFER if dx > 0 else new_x - COLLISION_BUFFER
    check_y = new_y + COLLISION_BUFFER if dy > 0 else new_y - COLLISION_BUFFER
    if 0 <= new_x < _width(grid) and _cell(grid, int(check_x), int(player.y)) not in _BLOCKING:
        player.x = new_x
    if 0 <= new_y < len(grid) and _cell(grid, int(player.x), int(check_y)) not in _BLOCKING:
        player.y = new_y


def move_forward(player: Player, grid: list[str]) -> None:
    """Step along the view direction unless a wall or door is in the way."""
    _step(player, grid, player.dir_x, player.dir_y)


def move_backward(player: Player, grid: list[str]) -> None:
    """Step against the view direction unless a wall or door is in the way."""
    _step(player, grid, -player.dir_x, -player.dir_y)


def move_left(player: Player, grid: list[str]) -> None:
    """Strafe to the left of the view direction."""
    _step(player, grid, player.dir_y, -player.dir_x)


def move_right(player: Player, grid: list[str]) -> None:
    """Strafe to the right of the view direction."""
    _step(player, grid, -player.dir_y, player.dir_x)


def rotate_player(player: Player, angle: float) -> None:
    """Rotate the view direction and camera plane by ``angle`` radians."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    dir_x, plane_x = player.dir_x, player.plane_x
    player.dir_x = dir_x * cos_a - player.dir_y * sin_a
    player.dir_y = dir_x * sin_a + player.dir_y * cos_a
    player.plane_x = plane_x * cos_a - player.plane_y * sin_a
    player.plane_y = plane_x * sin_a + player.plane_y * cos_a


def rotate_left(player: Player) -> None:
    """Turn left by one rotation step."""
    rotate_player(player, -ROT_SPEED)


def rotate_right(player: Player) -> None:
    """Turn right by one rotation step."""
    rotate_player(player, ROT_SPEED)


def mouse_rotate(player: Player, x: int, width: int) -> bool:
    """Turn by the pointer's offset from the screen centre.

    Returns True when the player turned, meaning the pointer should be
    moved back to the centre.
    """
    delta = x - width // 2
    if delta == 0:
        return False
    rotate_player(player, delta * MOUSE_SENSITIVITY)
    return True


def interact_door(player: Player, grid: list[str]) -> bool:
    """Open a closed door ('D') or close an open one ('O') in front of the player.

    An open door is not closed while the player stands in it. Returns True
    when the grid was changed.
    """
    target_x = int(player.x + player.dir_x)
    target_y = int(player.y + player.dir_y)
    if not (0 <= target_x < _width(grid) and 0 <= target_y < len(grid)):
        return False
    current = _cell(grid, target_x, target_y)
    if current == "D":
        replacement = "O"
    elif current == "O":
        if int(player.x) == target_x and int(player.y) == target_y:
            return False
        replacement = "D"
    else:
        return False
    row = grid[target_y]
    grid[target_y] = row[:target_x] + replacement + row[target_x + 1:]
    return True
"""Map grid reading, validation and player discovery."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

PLANE_LENGTH = 0.66
PLAYER_CHARS = frozenset("NSWE")

_BLANK_CHARS = frozenset(" \t\n\r")
_MANDATORY_CHARS = frozenset("01 ") | PLAYER_CHARS
_BONUS_CHARS = _MANDATORY_CHARS | frozenset("2D")
_MANDATORY_WALKABLE = frozenset("0") | PLAYER_CHARS
_BONUS_WALKABLE = _MANDATORY_WALKABLE | frozenset("2D")

# direction -> (dir_x, dir_y, plane_x, plane_y)
_FACINGS: dict[str, tuple[float, float, float, float]] = {
    "N": (0.0, -1.0, PLANE_LENGTH, 0.0),
    "S": (0.0, 1.0, -PLANE_LENGTH, 0.0),
    "W": (-1.0, 0.0, 0.0, -PLANE_LENGTH),
    "E": (1.0, 0.0, 0.0, PLANE_LENGTH),
}


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    x: float
    y: float
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    direction: str = ""

    @classmethod
    def facing(cls, x: float, y: float, direction: str) -> Player:
        """Create a player at (x, y) looking towards N, S, W or E."""
        try:
            dir_x, dir_y, plane_x, plane_y = _FACINGS[direction]
        except KeyError:
            raise ValueError(f"invalid player direction: {direction!r}") from None
        return cls(x, y, dir_x, dir_y, plane_x, plane_y, direction)


def _is_empty(line: str) -> bool:
    return all(ch in _BLANK_CHARS for ch in line)


def _cell(grid: list[str], x: int, y: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return " "


def parse_map(lines: Iterable[str]) -> list[str]:
    """Read map rows, skipping blank lines and padding rows with spaces.

    Each row is cut at its first line feed and then at its first carriage
    return; all rows are padded to the width of the longest one.
    """
    rows = [
        line.split("\n", 1)[0].split("\r", 1)[0]
        for line in lines
        if not _is_empty(line)
    ]
    width = max((len(row) for row in rows), default=0)
    return [row.ljust(width) for row in rows]


def check_map_chars(grid: list[str], bonus: bool = False) -> bool:
    """Tell whether every cell holds a character allowed on the map."""
    allowed = _BONUS_CHARS if bonus else _MANDATORY_CHARS
    return all(ch in allowed for row in grid for ch in row)


def check_map_closed(grid: list[str], bonus: bool = False) -> bool:
    """Tell whether no walkable cell touches the map edge or an empty cell."""
    walkable = _BONUS_WALKABLE if bonus else _MANDATORY_WALKABLE
    height = len(grid)
    width = max((len(row) for row in grid), default=0)
    for y, row in enumerate(grid):
        for x, ch in enumerate(row):
            if ch not in walkable:
                continue
            if y in (0, height - 1) or x in (0, width - 1):
                return False
            neighbours = (
                _cell(grid, x, y - 1),
                _cell(grid, x, y + 1),
                _cell(grid, x - 1, y),
                _cell(grid, x + 1, y),
            )
            if " " in neighbours:
                return False
    return True


def find_player(grid: list[str]) -> Player:
    """Locate the single player start and return the player it describes.

    Raises ValueError unless exactly one start position is on the map.
    """
    starts = [
        (x, y, ch)
        for y, row in enumerate(grid)
        for x, ch in enumerate(row)
        if ch in PLAYER_CHARS
    ]
    if len(starts) != 1:
        raise ValueError(f"expected one player start, found {len(starts)}")
    x, y, direction = starts[0]
    return Player.facing(x + 0.5, y + 0.5, direction)
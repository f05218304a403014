"""Reading of scene description files: textures, colours and the map."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .mapgrid import Player, check_map_chars, check_map_closed, find_player, parse_map

SCENE_EXTENSION = ".cub"
ELEMENT_COUNT = 6

_BLANK_CHARS = frozenset(" \t\n\r")
_TRAILING_JUNK = "\n\r \t"
_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?[0-9]*)")

# identifier prefix -> TexturePaths field, in the order they are tried
_TEXTURE_KEYS = (
    ("NO", "north"),
    ("SO", "south"),
    ("WE", "west"),
    ("EA", "east"),
)


class SceneError(ValueError):
    """Raised when a scene file cannot be read or is invalid."""


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..255."""

    r: int
    g: int
    b: int

    @property
    def value(self) -> int:
        """The colour packed as 0xRRGGBB."""
        return (self.r << 16) | (self.g << 8) | self.b


@dataclass
class TexturePaths:
    """Paths of the north, south, west and east wall textures."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None

    def __iter__(self) -> Iterator[str | None]:
        return iter((self.north, self.south, self.west, self.east))


@dataclass
class Scene:
    """Everything a scene file describes."""

    textures: TexturePaths = field(default_factory=TexturePaths)
    floor: Color | None = None
    ceiling: Color | None = None
    grid: list[str] = field(default_factory=list)
    player: Player | None = None

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.grid), default=0)


def check_filename(filename: str | None) -> bool:
    """Tell whether the text from the first '.' on begins with '.cub'."""
    if not filename:
        return False
    dot = filename.find(".")
    if dot == -1:
        return False
    return filename.startswith(SCENE_EXTENSION, dot)


def is_empty_line(line: str) -> bool:
    """Tell whether a line holds only spaces, tabs and line endings."""
    return all(ch in _BLANK_CHARS for ch in line)


def _split(text: str, separator: str) -> list[str]:
    return [word for word in text.split(separator) if word]


def _atoi(text: str) -> int:
    digits = _ATOI.match(text).group(1)
    if digits in ("", "+", "-"):
        return 0
    return int(digits)


def parse_texture(line: str, textures: TexturePaths) -> bool:
    """Take a texture line such as ``NO ./north.xpm`` into ``textures``.

    Returns False when the line is not a texture line or names a texture
    that is already set.
    """
    words = _split(line, " ")
    if len(words) < 2:
        return False
    for prefix, attr in _TEXTURE_KEYS:
        if words[0].startswith(prefix):
            break
    else:
        return False
    if getattr(textures, attr) is not None:
        return False
    setattr(textures, attr, words[1].rstrip(_TRAILING_JUNK))
    return True


def parse_color(line: str, scene: Scene) -> bool:
    """Take a floor (``F r,g,b``) or ceiling (``C r,g,b``) line into ``scene``.

    Returns False when the line is not a colour line, the colour is
    already set, or a component is missing or outside 0..255.
    """
    words = _split(line, " ")
    if len(words) < 2:
        return False
    if words[0].startswith("F"):
        attr = "floor"
    elif words[0].startswith("C"):
        attr = "ceiling"
    else:
        return False
    if getattr(scene, attr) is not None:
        return False
    parts = _split(words[1], ",")
    if len(parts) < 3:
        return False
    r, g, b = (_atoi(part) for part in parts[:3])
    if not all(0 <= component <= 255 for component in (r, g, b)):
        return False
    setattr(scene, attr, Color(r, g, b))
    return True


def parse_elements(lines: Iterator[str], scene: Scene) -> Scene:
    """Read the six texture and colour elements from ``lines`` into ``scene``.

    Lines are consumed only up to the sixth element, so the rest of the
    iterator holds the map. Raises SceneError on a bad or missing element.
    """
    count = 0
    while count < ELEMENT_COUNT:
        try:
            line = next(lines)
        except StopIteration:
            raise SceneError("Invalid elements") from None
        if is_empty_line(line):
            continue
        if not (parse_texture(line, scene.textures) or parse_color(line, scene)):
            raise SceneError("Invalid elements")
        count += 1
    return scene


def valid_color(floor: Color, ceiling: Color) -> bool:
    """Tell whether every component of both colours lies strictly in 1..254."""
    return all(
        0 < component < 255
        for color in (ceiling, floor)
        for component in (color.r, color.g, color.b)
    )


def _lines(text: str) -> Iterator[str]:
    start = 0
    while start < len(text):
        end = text.find("\n", start)
        if end == -1:
            yield text[start:]
            return
        yield text[start:end + 1]
        start = end + 1


def parse_scene(text: str, bonus: bool = False) -> Scene:
    """Parse the full contents of a scene file.

    Raises SceneError describing the first problem found.
    """
    lines = _lines(text)
    scene = parse_elements(lines, Scene())
    scene.grid = parse_map(lines)
    if not check_map_chars(scene.grid, bonus):
        raise SceneError("Invalid map characters")
    if not check_map_closed(scene.grid, bonus):
        raise SceneError("Map is not closed")
    try:
        scene.player = find_player(scene.grid)
    except ValueError:
        raise SceneError("Invalid player") from None
    return scene


def load_scene(path: str | os.PathLike[str], bonus: bool = False) -> Scene:
    """Read and parse a scene file."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise SceneError("Could not open file") from exc
    return parse_scene(text, bonus)


def _iter_paths(textures: TexturePaths) -> Iterable[str | None]:
    return tuple(textures)
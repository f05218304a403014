"""Loading of the wall, door and sprite textures."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .xpm import Image, XpmError, load_xpm

DEFAULT_ASSET_DIR = Path("assets/textures")
DOOR_FILE = "door.xpm"
SPRITE_FILES = ("sprite1.xpm", "sprite2.xpm")


@dataclass(frozen=True)
class TextureSet:
    """Wall textures in the order north, south, west, east, plus bonus art."""

    walls: tuple[Image, Image, Image, Image]
    door: Image | None = None
    sprites: tuple[Image, ...] = ()

    def __post_init__(self) -> None:
        if len(self.walls) != 4:
            raise ValueError("exactly four wall textures are needed")

    def wall(self, index: int) -> Image:
        """Return wall texture 0 (north) to 3 (east)."""
        if not 0 <= index < len(self.walls):
            raise IndexError(f"no wall texture {index}")
        return self.walls[index]


def _load(path: str | os.PathLike[str] | None) -> Image:
    if path is None:
        raise XpmError("texture path is missing")
    return load_xpm(path)


def load_textures(
    paths: Iterable[str | os.PathLike[str] | None],
    bonus: bool = False,
    asset_dir: str | os.PathLike[str] = DEFAULT_ASSET_DIR,
) -> TextureSet:
    """Load the four wall textures and, with ``bonus``, the door and sprites.

    The bonus images are read from ``asset_dir``. Raises XpmError when
    any texture cannot be loaded.
    """
    wall_paths = tuple(paths)
    if len(wall_paths) != 4:
        raise ValueError("expected four wall texture paths: NO, SO, WE, EA")
    walls = tuple(_load(path) for path in wall_paths)
    if not bonus:
        return TextureSet(walls)
    base = Path(asset_dir)
    door = load_xpm(base / DOOR_FILE)
    sprites = tuple(load_xpm(base / name) for name in SPRITE_FILES)
    return TextureSet(walls, door, sprites)
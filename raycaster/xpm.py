"""Reader for XPM pixmaps, the texture format used by the game.

Images are decoded to 32-bit 0xAARRGGBB pixels. A colour given as
``None`` becomes the fully transparent value ``TRANSPARENT``.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .colors import lookup_color

TRANSPARENT = 0xFF000000

_WORD_SEPARATOR = re.compile(r"[ \t]+")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or decoded."""


@dataclass(frozen=True)
class Image:
    """A decoded image: row-major 32-bit pixels."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise XpmError("image dimensions must be positive")
        if len(self.pixels) != self.width * self.height:
            raise XpmError("pixel count does not match image size")

    def color_at(self, x: int, y: int) -> int:
        """Return the pixel at (x, y), clamping the coordinates to the image."""
        x = min(max(x, 0), self.width - 1)
        y = min(max(y, 0), self.height - 1)
        return self.pixels[y * self.width + x]


def split_words(line: str) -> list[str]:
    """Split a line into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATOR.split(line) if word]


def _blank_comments(text: str, opener: str, closer: str, include_closer: bool) -> str:
    pieces: list[str] = []
    quoted = False
    copied_up_to = 0
    i = 0
    while i < len(text):
        if text[i] == '"':
            quoted = not quoted
        elif not quoted and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            if end == -1:
                stop = len(text)
            elif include_closer:
                stop = end + len(closer)
            else:
                stop = end
            pieces.append(text[copied_up_to:i])
            pieces.append(" " * (stop - i))
            copied_up_to = i = stop
            continue
        i += 1
    pieces.append(text[copied_up_to:])
    return "".join(pieces)


def strip_comments(text: str) -> str:
    """Blank out C-style comments that lie outside double quotes.

    Comments are replaced by spaces so that the text keeps its length.
    """
    text = _blank_comments(text, "/*", "*/", include_closer=True)
    return _blank_comments(text, "//", "\n", include_closer=False)


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Turn an XPM colour specification into a 0xRRGGBB value.

    ``#rrggbb`` is read as hexadecimal. Otherwise ``name`` (joined with
    ``end`` when given) is looked up among the named colours; "none"
    gives -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        match = _HEX_DIGITS.match(name, 1)
        return int(match.group(), 16) if match else 0
    if end:
        name = f"{name} {end}"
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def parse_xpm(lines: Iterable[str]) -> Image:
    """Decode an image from the quoted strings of an XPM file, in order."""
    source = iter(lines)
    header = split_words(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid XPM header")

    last_definition_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour definition")
        words = split_words(line[cpp:])
        try:
            c_index = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if c_index + 1 >= len(words):
            raise XpmError(f"colour definition without a colour: {line!r}")
        name = words[c_index + 1]
        end = words[c_index + 2] if c_index + 2 < len(words) else None
        key = line[:cpp]
        if last_definition_wins or key not in palette:
            palette[key] = text_to_rgb(name, end)

    row_length = width * cpp
    pixels: list[int] = []
    for _ in range(height):
        row = _next_line(source, "pixel row")
        if len(row) < row_length:
            raise XpmError(f"pixel row too short: {row!r}")
        for start in range(0, row_length, cpp):
            color = palette.get(row[start:start + cpp], 0)
            pixels.append(TRANSPARENT if color == -1 else color & 0xFFFFFFFF)
    return Image(width, height, tuple(pixels))


def xpm_from_data(data: Iterable[str]) -> Image:
    """Decode an image from XPM data held in memory as its strings."""
    return parse_xpm(data)


def _quoted_strings(text: str) -> Iterator[str]:
    position = 0
    while True:
        opening = text.find('"', position)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        position = closing + 1


def load_xpm(path: str | os.PathLike[str]) -> Image:
    """Read and decode an XPM file."""
    try:
        with open(path, "rb") as handle:
            text = handle.read().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)!r}: {exc.strerror}") from exc
    return parse_xpm(_quoted_strings(strip_comments(text)))
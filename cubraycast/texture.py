"""Wall textures loaded from XPM images."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from dataclasses import dataclass

from .config import SceneConfig
from .errors import GraphicsError

_IMAGE_ERROR = "invalid image"
_STRING = re.compile(r'"((?:[^"\\]|\\.)*)"')
_CONTEXTS = frozenset({"c", "g", "g4", "m", "s"})
_NAMED_COLORS = {
    "black": 0x000000,
    "white": 0xFFFFFF,
    "red": 0xFF0000,
    "green": 0x00FF00,
    "blue": 0x0000FF,
    "yellow": 0xFFFF00,
    "gray": 0xBEBEBE,
    "grey": 0xBEBEBE,
}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class Texture:
    """A decoded image: ``pixels`` holds 0xRRGGBB values row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture dimensions must be positive")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match the dimensions")

    def pixel(self, x: int, y: int) -> int:
        """Colour at ``(x, y)``; coordinates are clamped to the image."""
        x = min(max(int(x), 0), self.width - 1)
        y = min(max(int(y), 0), self.height - 1)
        return self.pixels[y * self.width + x]


def _hex_color(digits: str) -> int:
    if not digits or len(digits) % 3 or not set(digits) <= _HEX_DIGITS:
        raise GraphicsError(_IMAGE_ERROR)
    size = len(digits) // 3
    color = 0
    for start in (0, size, 2 * size):
        channel = int(digits[start:start + size], 16)
        if size == 1:
            channel *= 17
        elif size > 2:
            channel >>= 4 * (size - 2)
        color = (color << 8) | channel
    return color


def _color_value(spec: str) -> int:
    """Decode a colour spec; transparent entries become black."""
    spec = spec.strip()
    lowered = spec.lower()
    if lowered == "none":
        return 0
    if spec.startswith("#"):
        return _hex_color(spec[1:])
    if lowered in _NAMED_COLORS:
        return _NAMED_COLORS[lowered]
    raise GraphicsError(_IMAGE_ERROR)


def _color_entry(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise GraphicsError(_IMAGE_ERROR)
    key = line[:cpp]
    specs: dict[str, str] = {}
    context: str | None = None
    words: list[str] = []
    for token in line[cpp:].split():
        if token in _CONTEXTS and (context is None or words):
            if context is not None:
                specs[context] = " ".join(words)
            context, words = token, []
        elif context is None:
            raise GraphicsError(_IMAGE_ERROR)
        else:
            words.append(token)
    if context is not None and words:
        specs[context] = " ".join(words)
    if not specs:
        raise GraphicsError(_IMAGE_ERROR)
    spec = specs.get("c", next(iter(specs.values())))
    return key, _color_value(spec)


def parse_xpm(text: str) -> Texture:
    """Decode the text of an XPM image."""
    strings = _STRING.findall(text)
    if not strings:
        raise GraphicsError(_IMAGE_ERROR)
    header = strings[0].split()
    try:
        width, height, ncolors, cpp = (int(value) for value in header[:4])
    except ValueError as exc:
        raise GraphicsError(_IMAGE_ERROR) from exc
    if min(width, height, ncolors, cpp) <= 0:
        raise GraphicsError(_IMAGE_ERROR)
    if len(strings) < 1 + ncolors + height:
        raise GraphicsError(_IMAGE_ERROR)
    colors = dict(_color_entry(line, cpp) for line in strings[1:1 + ncolors])
    pixels: list[int] = []
    for row in strings[1 + ncolors:1 + ncolors + height]:
        if len(row) < width * cpp:
            raise GraphicsError(_IMAGE_ERROR)
        try:
            pixels.extend(
                colors[row[start:start + cpp]]
                for start in range(0, width * cpp, cpp)
            )
        except KeyError as exc:
            raise GraphicsError(_IMAGE_ERROR) from exc
    return Texture(width, height, tuple(pixels))


def load_xpm(path: str | os.PathLike[str]) -> Texture:
    """Read and decode an XPM file."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise GraphicsError(_IMAGE_ERROR) from exc
    return parse_xpm(text)


def load_textures(config: SceneConfig) -> tuple[Texture, ...]:
    """Load the wall textures in the order north, south, east, west."""
    paths: Sequence[str | None] = (
        config.north,
        config.south,
        config.east,
        config.west,
    )
    if any(path is None for path in paths):
        raise GraphicsError(_IMAGE_ERROR)
    return tuple(load_xpm(path) for path in paths if path is not None)
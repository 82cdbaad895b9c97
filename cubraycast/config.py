"""Parsing of the six configuration lines of a scene file."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .errors import MapError

CONFIG_LINE_COUNT = 6

_BLANKS = " \t"
_DIGITS = frozenset("0123456789")
_TEXTURE_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
_COLOR_KEYS = {"F": "floor", "C": "ceiling"}

_SETTINGS_ERROR = "Valid settings have not been defined."
_RGB_ERROR = "Invalid RGB declaration"


@dataclass(frozen=True)
class Rgb:
    """A colour with 8-bit channels."""

    r: int
    g: int
    b: int

    def to_int(self) -> int:
        """Pack as 0xRRGGBB."""
        return (self.r << 16) | (self.g << 8) | self.b


@dataclass
class SceneConfig:
    """Texture paths and colours declared by a scene."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: Rgb = field(default_factory=lambda: Rgb(0, 0, 0))
    ceiling: Rgb = field(default_factory=lambda: Rgb(0, 0, 0))


def split_first_and_rest(line: str) -> list[str]:
    """Split a line into its first word and the space-trimmed remainder."""
    stripped = line.lstrip(_BLANKS)
    if not stripped:
        return []
    end = next(
        (i for i, ch in enumerate(stripped) if ch in _BLANKS), len(stripped)
    )
    parts = [stripped[:end]]
    rest = stripped[end:]
    if rest:
        parts.append(rest.strip(" "))
    return parts


def is_number(text: str) -> bool:
    """True if ``text`` trimmed of spaces is a non-empty run of digits."""
    trimmed = text.strip(" ")
    return bool(trimmed) and all(ch in _DIGITS for ch in trimmed)


def count_commas(text: str) -> int:
    return text.count(",")


def parse_rgb(text: str) -> Rgb:
    """Parse ``R,G,B`` with each channel 0..255; raise MapError otherwise."""
    if count_commas(text) != 2:
        raise MapError(_RGB_ERROR)
    fields = [item for item in text.split(",") if item]
    if len(fields) != 3:
        raise MapError(_RGB_ERROR)
    trimmed = [item.strip(" ") for item in fields]
    if any(len(item) > 3 or not is_number(item) for item in trimmed):
        raise MapError(_RGB_ERROR)
    r, g, b = (int(item) for item in trimmed)
    if not all(0 <= value <= 255 for value in (r, g, b)):
        raise MapError(_RGB_ERROR)
    return Rgb(r, g, b)


def check_texture_path(path: str) -> str:
    """Ensure ``path`` names a readable ``.xpm`` file and return it."""
    if len(path) < 4 or not path.endswith(".xpm"):
        raise MapError("Invalid type of sprite")
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise MapError("Sprite doesn't exist.") from exc
    return path


def _set_texture(config: SceneConfig, key: str, value: str | None) -> None:
    if value is None:
        raise MapError("Invalid texture declaration.")
    check_texture_path(value)
    attribute = _TEXTURE_KEYS.get(key)
    if attribute is None:
        raise MapError(_SETTINGS_ERROR)
    setattr(config, attribute, value)


def _set_color(config: SceneConfig, key: str, value: str | None) -> None:
    if value is None:
        raise MapError(_RGB_ERROR)
    color = parse_rgb(value)
    attribute = _COLOR_KEYS.get(key)
    if attribute is None:
        raise MapError("Invalid key config")
    setattr(config, attribute, color)


def parse_config_lines(lines: Iterable[str]) -> SceneConfig:
    """Build a SceneConfig from the configuration lines of a scene."""
    lines = list(lines)
    if not lines:
        raise MapError("Configs lines don't exists")
    config = SceneConfig()
    for line in lines:
        parts = split_first_and_rest(line)
        key = parts[0] if parts else ""
        value = parts[1] if len(parts) > 1 else None
        if len(key) == 2:
            _set_texture(config, key, value)
        elif len(key) == 1:
            _set_color(config, key, value)
        else:
            raise MapError(_SETTINGS_ERROR)
    if len(lines) != CONFIG_LINE_COUNT:
        raise MapError("Invalid number of configuration lines")
    return config
"""Reading a scene file and splitting it into configuration and map."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from .config import CONFIG_LINE_COUNT, SceneConfig, parse_config_lines
from .errors import MALLOC_ERR, MapError
from .mapcheck import validate_map

SCENE_EXTENSION = ".cub"


@dataclass
class Scene:
    """A parsed and validated scene."""

    config: SceneConfig
    rows: list[str] = field(default_factory=list)


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a ``.cub`` file, split on newlines only."""
    name = os.fspath(path)
    if len(name) < len(SCENE_EXTENSION) or not name.endswith(SCENE_EXTENSION):
        raise MapError("Invalid file extension")
    try:
        handle = open(name, encoding="utf-8", errors="surrogateescape", newline="")
    except OSError as exc:
        raise MapError("Cannot read map.") from exc
    with handle:
        try:
            text = handle.read()
        except OSError as exc:
            raise MapError("Error\nCannot read map", status=MALLOC_ERR) from exc
    return text.split("\n")


def split_sections(lines: Iterable[str]) -> tuple[list[str], list[str]]:
    """Separate the configuration lines from the map rows.

    The first six non-empty lines are configuration. The map starts at the
    first non-empty line after them; empty lines inside or after it are kept.
    """
    configs: list[str] = []
    content: list[str] = []
    for line in lines:
        if line and len(configs) < CONFIG_LINE_COUNT:
            configs.append(line)
        elif len(configs) == CONFIG_LINE_COUNT and (content or line):
            content.append(line)
    return configs, content


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read, parse and validate a scene file."""
    configs, content = split_sections(read_lines(path))
    config = parse_config_lines(configs)
    rows = validate_map(content)
    return Scene(config=config, rows=rows)
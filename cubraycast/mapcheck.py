"""Validation of the map grid of a scene."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import MapError

PLAYER_CHARS = frozenset("NSEW")
VALID_CHARS = frozenset(" 01NSEW")
_WALKABLE = frozenset("0NSEW")


def has_single_player(rows: Sequence[str]) -> bool:
    """True if exactly one start position (N, S, E or W) appears."""
    return sum(ch in PLAYER_CHARS for row in rows for ch in row) == 1


def only_valid_chars(rows: Sequence[str]) -> bool:
    """True if every cell is a space, a wall, a floor or a start position."""
    return all(ch in VALID_CHARS for row in rows for ch in row)


def _is_open(rows: Sequence[str], row: int, col: int) -> bool:
    line = rows[row]
    if row == 0 or col == 0 or row == len(rows) - 1 or col == len(line) - 1:
        return True
    above = rows[row - 1]
    if col >= len(above) or above[col] == " ":
        return True
    if line[col - 1] == " " or line[col + 1] == " ":
        return True
    below = rows[row + 1]
    if len(below) < col:
        return True
    # A row below that ends exactly at this column does not count as open.
    return len(below) > col and below[col] == " "


def is_closed(rows: Sequence[str]) -> bool:
    """True if no floor or start cell touches the border, a gap or a space."""
    return not any(
        ch in _WALKABLE and _is_open(rows, row, col)
        for row, line in enumerate(rows)
        for col, ch in enumerate(line)
    )


def validate_map(rows: Sequence[str]) -> list[str]:
    """Check the map grid and return its rows; raise MapError if invalid."""
    rows = list(rows)
    if not rows:
        raise MapError("Map content don't exist!")
    if not only_valid_chars(rows):
        raise MapError("Invalid character in map")
    if not has_single_player(rows):
        raise MapError("There must be one character to represent the player")
    if not is_closed(rows):
        raise MapError("The map must be around 1 with no space inside")
    return rows
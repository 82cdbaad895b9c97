"""The player: start position, key state, movement and wall collision."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from .errors import MapError
from .vector import Vector

PI = 3.14159265359
MOVE_SPEED = 5
ROTATE_SPEED = 3.0
LIMIT = 0.4
PLANE_LENGTH = 0.66

_ONE = Vector(1.0, 1.0)
_ZERO = Vector(0.0, 0.0)

_DIRECTIONS = {
    "N": Vector(0.0, -1.0),
    "S": Vector(0.0, 1.0),
    "E": Vector(1.0, 0.0),
    "W": Vector(-1.0, 0.0),
}
_PLANES = {
    "N": Vector(PLANE_LENGTH, 0.0),
    "S": Vector(-PLANE_LENGTH, 0.0),
    "E": Vector(0.0, PLANE_LENGTH),
    "W": Vector(0.0, -PLANE_LENGTH),
}


class Key(IntEnum):
    """Key codes the game reacts to."""

    ESCAPE = 65307
    W = 119
    A = 97
    S = 115
    D = 100
    LEFT = 65361
    RIGHT = 65363


_KEY_FLAGS = {
    Key.W: "key_up",
    Key.S: "key_down",
    Key.A: "key_left",
    Key.D: "key_right",
    Key.LEFT: "left_rotate",
    Key.RIGHT: "right_rotate",
}


def _as_key(key: int) -> Key | None:
    try:
        return Key(key)
    except ValueError:
        return None


def _square_collision(
    pos: Vector, next_pos: Vector, cell: Vector, rows: Sequence[str]
) -> Vector:
    """Per-axis factor (0 or 1) allowing movement against one map cell."""
    if cell.y < 0 or cell.x < 0:
        return _ONE
    row, col = int(cell.y), int(cell.x)
    if row >= len(rows) or col >= len(rows[row]):
        return _ONE
    if rows[row][col] != "1":
        return _ONE
    allow_x = (
        next_pos.x + LIMIT < cell.x
        or next_pos.x - LIMIT > cell.x + 1
        or pos.y + LIMIT < cell.y
        or pos.y - LIMIT > cell.y + 1
    )
    allow_y = (
        next_pos.y + LIMIT < cell.y
        or next_pos.y - LIMIT > cell.y + 1
        or pos.x + LIMIT < cell.x
        or pos.x - LIMIT > cell.x + 1
    )
    return Vector(1.0 if allow_x else 0.0, 1.0 if allow_y else 0.0)


def check_collision(
    pos: Vector, next_pos: Vector, movement: Vector, rows: Sequence[str]
) -> Vector:
    """Return per-axis factors (0 or 1) that keep the player out of walls.

    The eight cells around ``pos`` are checked; a zero movement is always
    allowed.
    """
    result = _ONE
    if movement.magnitude() <= 0:
        return result
    base_x = math.floor(pos.x)
    base_y = math.floor(pos.y)
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            cell = Vector(float(base_x + dx), float(base_y + dy))
            result = result.scale(_square_collision(pos, next_pos, cell, rows))
    return result


@dataclass
class Player:
    """Position, view direction, camera plane and held keys."""

    pos: Vector = field(default_factory=Vector)
    dir: Vector = field(default_factory=Vector)
    plane: Vector = field(default_factory=Vector)
    key_up: bool = False
    key_down: bool = False
    key_left: bool = False
    key_right: bool = False
    left_rotate: bool = False
    right_rotate: bool = False

    @classmethod
    def from_map(cls, rows: Sequence[str]) -> Player:
        """Place the player on the first start cell found in ``rows``."""
        for row_index, line in enumerate(rows):
            for col_index, ch in enumerate(line):
                if ch in _DIRECTIONS:
                    return cls(
                        pos=Vector(col_index + 0.5, row_index + 0.5),
                        dir=_DIRECTIONS[ch],
                        plane=_PLANES[ch],
                    )
        raise MapError("There must be one character to represent the player")

    def press(self, key: int) -> bool:
        """Record a key press; return True if the key asks to quit."""
        code = _as_key(key)
        if code is Key.ESCAPE:
            return True
        flag = _KEY_FLAGS.get(code) if code is not None else None
        if flag is not None:
            setattr(self, flag, True)
        return False

    def release(self, key: int) -> None:
        """Record a key release."""
        code = _as_key(key)
        flag = _KEY_FLAGS.get(code) if code is not None else None
        if flag is not None:
            setattr(self, flag, False)

    def _velocity(self) -> Vector:
        if self.key_up:
            return self.dir * MOVE_SPEED
        if self.key_down:
            return self.dir * -MOVE_SPEED
        return _ZERO

    def _strafe(self) -> Vector:
        if self.key_left:
            return self.dir.rotated(-PI / 2) * MOVE_SPEED
        if self.key_right:
            return self.dir.rotated(PI / 2) * MOVE_SPEED
        return _ZERO

    def _rotation_speed(self) -> float:
        if self.left_rotate:
            return -ROTATE_SPEED
        if self.right_rotate:
            return ROTATE_SPEED
        return 0.0

    def update(self, elapsed_ms: float, rows: Sequence[str]) -> None:
        """Move and turn according to held keys over ``elapsed_ms``."""
        seconds = elapsed_ms / 1000
        movement = self._velocity() * seconds + self._strafe() * seconds
        next_pos = self.pos + movement
        movement = movement.scale(check_collision(self.pos, next_pos, movement, rows))
        self.pos = self.pos + movement
        angle = self._rotation_speed() * seconds
        self.dir = self.dir.rotated(angle)
        self.plane = self.plane.rotated(angle)
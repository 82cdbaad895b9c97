"""Two-dimensional vectors used for positions, directions and movement."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: object) -> Vector:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def scale(self, other: Vector) -> Vector:
        """Multiply component by component."""
        return Vector(self.x * other.x, self.y * other.y)

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def rotated(self, angle: float) -> Vector:
        """Rotate by ``angle`` radians (positive is clockwise on screen)."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )
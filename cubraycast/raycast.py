"""Frame buffer and the raycasting renderer."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from .config import Rgb
from .player import Player
from .texture import Texture
from .vector import Vector

WIDTH = 800
HEIGHT = 600
VERTICAL = 0
HORIZONTAL = 1

_MIN_DISTANCE = 1e-6


@dataclass
class Frame:
    """An RGB image the renderer draws into."""

    width: int = WIDTH
    height: int = HEIGHT
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("frame dimensions must be positive")
        self.data = bytearray(self.width * self.height * 3)

    def _offset(self, x: int, y: int) -> int:
        return (y * self.width + x) * 3

    def put(self, x: int, y: int, color: int) -> None:
        """Set a pixel; points outside the frame are ignored."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        pos = self._offset(x, y)
        self.data[pos:pos + 3] = bytes(
            ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
        )

    def get(self, x: int, y: int) -> int:
        """Colour of a pixel as 0xRRGGBB."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside the frame")
        pos = self._offset(x, y)
        r, g, b = self.data[pos:pos + 3]
        return (r << 16) | (g << 8) | b

    def clear(self) -> None:
        """Paint the whole frame black."""
        self.data[:] = bytes(len(self.data))

    def _fill_rows(self, first: int, last: int, color: int) -> None:
        first = max(first, 0)
        last = min(last, self.height)
        if first >= last:
            return
        triple = bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
        self.data[first * self.width * 3:last * self.width * 3] = triple * (
            self.width * (last - first)
        )


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall: perpendicular distance and the side struck."""

    distance: float
    side: int
    cell: tuple[int, int]


def ray_direction(player: Player, column: int, width: int = WIDTH) -> Vector:
    """Direction of the ray through screen ``column``."""
    camera_x = 2 * (column / width) - 1
    return player.dir + player.plane * camera_x


def _ratio(numerator: float, divisor: float) -> float:
    return abs(numerator / divisor) if divisor else math.inf


def cast_ray(player: Player, ray: Vector, rows: Sequence[str]) -> RayHit:
    """Step through the grid along ``ray`` until a wall is met.

    Leaving the grid counts as meeting a wall.
    """
    pos = player.pos
    cell_x = math.floor(pos.x)
    cell_y = math.floor(pos.y)
    delta_x = abs(1 / ray.x) if ray.x else 0.0
    delta_y = 1.0 if not ray.x else 0.0
    if ray.y:
        delta_y = abs(1 / ray.y)
    else:
        delta_y = 0.0
        delta_x = 1.0
    step_x = -1 if ray.x < 0 else 1
    step_y = -1 if ray.y < 0 else 1
    side_x = _ratio(pos.x - cell_x if ray.x < 0 else cell_x + 1 - pos.x, ray.x)
    side_y = _ratio(pos.y - cell_y if ray.y < 0 else cell_y + 1 - pos.y, ray.y)
    grid_width = max((len(row) for row in rows), default=0)
    side = VERTICAL
    while True:
        if side_x < side_y:
            cell_x += step_x
            side_x += delta_x
            side = VERTICAL
        else:
            cell_y += step_y
            side_y += delta_y
            side = HORIZONTAL
        if not (0 <= cell_y < len(rows) and 0 <= cell_x < grid_width):
            break
        line = rows[cell_y]
        if cell_x < len(line) and line[cell_x] == "1":
            break
    distance = side_x - delta_x if side == VERTICAL else side_y - delta_y
    return RayHit(distance=distance, side=side, cell=(cell_x, cell_y))


def draw_span(wall_height: int, height: int = HEIGHT) -> tuple[int, int]:
    """First and last screen rows of a wall slice, clamped to the screen."""
    half_wall = int(wall_height / 2)
    start = height // 2 - half_wall
    end = height // 2 + half_wall
    return max(start, 0), min(end, height - 1)


def _texture_side(player: Player, ray: Vector, hit: RayHit) -> tuple[int, float]:
    """Texture index and the wall coordinate where the ray struck."""
    if hit.side == HORIZONTAL:
        wall_x = player.pos.x + hit.distance * ray.x
        index = 1 if ray.y < 0 else 0
    else:
        wall_x = player.pos.y + hit.distance * ray.y
        index = 2 if ray.x < 0 else 3
    return index, wall_x


def _draw_wall(
    frame: Frame,
    player: Player,
    column: int,
    ray: Vector,
    hit: RayHit,
    textures: Sequence[Texture],
) -> None:
    distance = max(hit.distance, _MIN_DISTANCE)
    wall_height = max(int(frame.height / distance), 1)
    start, end = draw_span(wall_height, frame.height)
    offset = int(wall_height / 2) - frame.height // 2 if start == 0 else 0
    index, wall_x = _texture_side(player, ray, hit)
    texture = textures[index]
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * texture.width)
    for y in range(start, end + 1):
        tex_y = texture.height * (y + offset - start) // wall_height
        frame.put(column, y, texture.pixel(tex_x, tex_y))


def render(
    frame: Frame,
    player: Player,
    rows: Sequence[str],
    textures: Sequence[Texture],
    ceiling: Rgb,
    floor: Rgb,
) -> None:
    """Draw ceiling, floor and textured walls as seen by ``player``."""
    half = frame.height // 2
    frame._fill_rows(0, half, ceiling.to_int())
    frame._fill_rows(half, frame.height, floor.to_int())
    for column in range(frame.width):
        ray = ray_direction(player, column, frame.width)
        hit = cast_ray(player, ray, rows)
        _draw_wall(frame, player, column, ray, hit, textures)
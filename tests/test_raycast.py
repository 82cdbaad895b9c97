import pytest

from cubraycast.config import Rgb
from cubraycast.player import Player
from cubraycast.raycast import (
    HORIZONTAL,
    VERTICAL,
    Frame,
    cast_ray,
    draw_span,
    ray_direction,
    render,
)
from cubraycast.texture import Texture
from cubraycast.vector import Vector

ROWS = [
    "11111",
    "10001",
    "10N01",
    "10001",
    "11111",
]
COLORS = (0x110000, 0x002200, 0x000033, 0x444444)
TEXTURES = tuple(Texture(1, 1, (color,)) for color in COLORS)
CEILING = Rgb(10, 20, 30)
FLOOR = Rgb(40, 50, 60)


def test_frame_put_get_round_trip():
    frame = Frame(4, 3)
    frame.put(2, 1, 0xABCDEF)
    assert frame.get(2, 1) == 0xABCDEF
    assert frame.get(1, 2) == 0


def test_frame_put_outside_is_ignored():
    frame = Frame(4, 3)
    frame.put(-1, 0, 0xFFFFFF)
    frame.put(4, 0, 0xFFFFFF)
    frame.put(0, 3, 0xFFFFFF)
    pixels = [frame.get(x, y) for y in range(3) for x in range(4)]
    assert pixels == [0] * 12


def test_frame_get_outside_raises():
    frame = Frame(4, 3)
    with pytest.raises(IndexError):
        frame.get(4, 0)


def test_frame_clear():
    frame = Frame(4, 3)
    frame.put(0, 0, 0x123456)
    frame.clear()
    assert frame.get(0, 0) == 0


def test_default_frame_size():
    frame = Frame()
    assert (frame.width, frame.height) == (800, 600)


def test_ray_direction_centre_is_view_direction():
    player = Player.from_map(ROWS)
    assert ray_direction(player, 400, 800) == player.dir


def test_ray_direction_edges_are_symmetric():
    player = Player.from_map(ROWS)
    left = ray_direction(player, 0, 800)
    right = ray_direction(player, 800, 800)
    assert (left + right) * 0.5 == player.dir
    assert left != right


def test_cast_ray_north_hits_horizontal_wall():
    player = Player.from_map(ROWS)
    hit = cast_ray(player, Vector(0.0, -1.0), ROWS)
    assert hit.side == HORIZONTAL
    assert hit.distance == pytest.approx(1.5)
    assert hit.cell == (2, 0)


def test_cast_ray_east_matches_north_by_symmetry():
    player = Player.from_map(ROWS)
    north = cast_ray(player, Vector(0.0, -1.0), ROWS)
    east = cast_ray(player, Vector(1.0, 0.0), ROWS)
    assert east.side == VERTICAL
    assert east.distance == pytest.approx(north.distance)
    assert east.cell == (4, 2)


def test_cast_ray_leaving_grid_stops():
    rows = ["N00"]
    player = Player.from_map(rows)
    hit = cast_ray(player, Vector(1.0, 0.0), rows)
    assert hit.cell == (3, 0)


def test_draw_span_clamps():
    assert draw_span(10000, 600) == (0, 599)


def test_draw_span_zero_height_is_centre():
    assert draw_span(0, 600) == (300, 300)


def test_draw_span_is_centred():
    start, end = draw_span(100, 600)
    assert start + end == 600


def test_render_north_wall_uses_second_texture():
    frame = Frame(20, 10)
    player = Player.from_map(ROWS)
    render(frame, player, ROWS, TEXTURES, CEILING, FLOOR)
    assert frame.get(10, 5) == COLORS[1]
    assert frame.get(10, 0) == CEILING.to_int()
    assert frame.get(10, 9) == FLOOR.to_int()


def test_render_east_wall_uses_fourth_texture():
    frame = Frame(20, 10)
    player = Player(pos=Vector(2.5, 2.5), dir=Vector(1.0, 0.0), plane=Vector(0.0, 0.66))
    render(frame, player, ROWS, TEXTURES, CEILING, FLOOR)
    assert frame.get(10, 5) == COLORS[3]


def test_render_west_wall_uses_third_texture():
    frame = Frame(20, 10)
    player = Player(pos=Vector(2.5, 2.5), dir=Vector(-1.0, 0.0), plane=Vector(0.0, -0.66))
    render(frame, player, ROWS, TEXTURES, CEILING, FLOOR)
    assert frame.get(10, 5) == COLORS[2]
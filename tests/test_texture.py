import pytest

from cubraycast.config import SceneConfig
from cubraycast.errors import GraphicsError
from cubraycast.texture import Texture, load_textures, load_xpm, parse_xpm

SAMPLE = """/* XPM */
static char *sample[] = {
"2 2 2 1",
"a c #FF0000",
"b c #0000FF",
"ab",
"ba"
};
"""


def _uniform_xpm(color: str) -> str:
    return f'/* XPM */\nstatic char *t[] = {{\n"1 1 1 1",\n"x c {color}",\n"x"\n}};\n'


def test_parse_sample_dimensions():
    texture = parse_xpm(SAMPLE)
    assert (texture.width, texture.height) == (2, 2)


def test_parse_sample_pixels():
    texture = parse_xpm(SAMPLE)
    assert texture.pixel(0, 0) == 0xFF0000
    assert texture.pixel(1, 0) == 0x0000FF
    assert texture.pixel(0, 1) == 0x0000FF
    assert texture.pixel(1, 1) == 0xFF0000


def test_two_chars_per_pixel():
    text = '"2 1 2 2",\n"aa c #00FF00",\n"bb c #FFFFFF",\n"bbaa"'
    texture = parse_xpm(text)
    assert texture.pixels == (0xFFFFFF, 0x00FF00)


def test_none_colour_is_black():
    texture = parse_xpm(_uniform_xpm("None"))
    assert texture.pixel(0, 0) == 0


def test_short_hex_expands():
    texture = parse_xpm(_uniform_xpm("#FFF"))
    assert texture.pixel(0, 0) == 0xFFFFFF


def test_pixel_clamps_to_edges():
    texture = parse_xpm(SAMPLE)
    assert texture.pixel(5, 5) == texture.pixel(1, 1)
    assert texture.pixel(-3, 0) == texture.pixel(0, 0)


@pytest.mark.parametrize(
    "text",
    [
        "",
        '"x y 1 1"',
        '"2 2 1 1",\n"a c #FF0000",\n"aa"',
        '"1 1 1 1",\n"a c #FF0000",\n"b"',
        '"1 1 1 1",\n"a c nosuchcolour",\n"a"',
    ],
)
def test_invalid_images_raise(text):
    with pytest.raises(GraphicsError):
        parse_xpm(text)


def test_texture_checks_pixel_count():
    with pytest.raises(ValueError):
        Texture(2, 2, (1, 2, 3))


def test_load_xpm_from_file(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == parse_xpm(SAMPLE)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(GraphicsError):
        load_xpm(tmp_path / "missing.xpm")


def test_load_textures_order(tmp_path):
    colors = {
        "north": "#110000",
        "south": "#002200",
        "west": "#000033",
        "east": "#444444",
    }
    paths = {}
    for side, color in colors.items():
        path = tmp_path / f"{side}.xpm"
        path.write_text(_uniform_xpm(color))
        paths[side] = str(path)
    textures = load_textures(SceneConfig(**paths))
    expected = [parse_xpm(_uniform_xpm(colors[side])) for side in ("north", "south", "east", "west")]
    assert list(textures) == expected


def test_load_textures_needs_every_path(tmp_path):
    path = tmp_path / "a.xpm"
    path.write_text(SAMPLE)
    config = SceneConfig(north=str(path), south=str(path), west=str(path))
    with pytest.raises(GraphicsError):
        load_textures(config)
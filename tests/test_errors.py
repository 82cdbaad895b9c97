import pytest

from cubraycast.errors import (
    MALLOC_ERR,
    MAP_ERR,
    MLX_ERR,
    CubError,
    GraphicsError,
    MapError,
    format_error,
)


def test_map_error_format():
    text = format_error(MapError("Invalid file extension"))
    assert text == "Error\n\033[90mInvalid file extension\033[0m\n"


def test_graphics_error_format():
    text = format_error(GraphicsError("invalid image"))
    assert text == "Error\n\033[90minvalid image\033[0m\n"


def test_status_codes():
    assert MapError("x").status == MAP_ERR == -1
    assert GraphicsError("x").status == MLX_ERR == -32


def test_allocation_failure_adds_notice():
    text = format_error(CubError("Cannot read map", status=MALLOC_ERR))
    assert text.startswith("Error\nFalha na alocação")
    assert text.endswith("\033[90mCannot read map\033[0m\n")


def test_positive_status_prints_only_message():
    text = format_error(CubError("YOU END THE GAME", status=1))
    assert text == "\033[90mYOU END THE GAME\033[0m\n"


def test_empty_message_has_only_header():
    assert format_error(MapError("")) == "Error\n"


def test_message_is_exception_text():
    err = MapError("Map content don't exist!")
    assert str(err) == "Map content don't exist!"
    assert err.message == "Map content don't exist!"


def test_subclasses_are_caught_as_base():
    with pytest.raises(CubError) as info:
        raise GraphicsError("in mlx_new_window")
    assert info.value.status == MLX_ERR
    assert info.value.message == "in mlx_new_window"
    assert format_error(info.value) == "Error\n\033[90min mlx_new_window\033[0m\n"


def test_plain_exception_is_treated_as_failure():
    assert format_error(ValueError("bad")) == "Error\n\033[90mbad\033[0m\n"
"""Exceptions raised by the game and the text shown when it stops."""

from __future__ import annotations

MAP_ERR = -1
MLX_ERR = -32
MALLOC_ERR = -33

_GREY = "\033[90m"
_RESET = "\033[0m"


class CubError(Exception):
    """Base error; ``status`` below zero marks a failure."""

    status: int = MAP_ERR

    def __init__(self, message: str = "", status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class MapError(CubError):
    """The scene file or its contents are invalid."""

    status = MAP_ERR


class GraphicsError(CubError):
    """The display or an image could not be set up."""

    status = MLX_ERR


def format_error(error: BaseException) -> str:
    """Return the text printed when the game stops because of ``error``."""
    status = getattr(error, "status", MAP_ERR)
    message = getattr(error, "message", str(error))
    detail = f"{_GREY}{message}{_RESET}\n" if message else ""
    if status >= 0:
        return detail
    text = "Error\n"
    if status == MALLOC_ERR:
        text += "Falha na alocação"
    return text + detail
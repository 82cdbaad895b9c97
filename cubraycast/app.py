"""The game loop, the window and the command-line entry point."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from .config import Rgb
from .errors import CubError, GraphicsError, MapError, format_error
from .player import Key, Player
from .raycast import Frame, render
from .scene import Scene, load_scene
from .texture import Texture, load_textures

USAGE = "Theres no maps: Try > ./cub3d maps/default.cub"
GOODBYE = "YOU END THE GAME"
TITLE = "Cub3d"


def time_in_milliseconds() -> float:
    """Wall-clock time in milliseconds."""
    return time.time() * 1000.0


@dataclass
class Game:
    """Everything needed to draw and update one running scene."""

    rows: list[str]
    player: Player
    textures: Sequence[Texture]
    ceiling: Rgb
    floor: Rgb
    frame: Frame = field(default_factory=Frame)
    delta_time: float = 0.0

    @classmethod
    def from_scene(cls, scene: Scene, frame: Frame | None = None) -> Game:
        """Set up the player and textures for ``scene``."""
        player = Player.from_map(scene.rows)
        textures = load_textures(scene.config)
        return cls(
            rows=scene.rows,
            player=player,
            textures=textures,
            ceiling=scene.config.ceiling,
            floor=scene.config.floor,
            frame=frame if frame is not None else Frame(),
        )

    def tick(self, elapsed_ms: float) -> float:
        """Move the player by ``elapsed_ms`` and redraw; return the draw time."""
        self.player.update(elapsed_ms, self.rows)
        start = time_in_milliseconds()
        self.frame.clear()
        render(self.frame, self.player, self.rows, self.textures, self.ceiling, self.floor)
        self.delta_time = time_in_milliseconds() - start
        return self.delta_time

    def run(self) -> None:
        """Open a window and play until it is closed or Escape is pressed."""
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        import pygame

        keymap = {
            pygame.K_ESCAPE: Key.ESCAPE,
            pygame.K_w: Key.W,
            pygame.K_a: Key.A,
            pygame.K_s: Key.S,
            pygame.K_d: Key.D,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
        }
        size = (self.frame.width, self.frame.height)
        pygame.init()
        try:
            try:
                screen = pygame.display.set_mode(size)
            except pygame.error as exc:
                raise GraphicsError("Something wrong with mlx") from exc
            pygame.display.set_caption(TITLE)
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        code = keymap.get(event.key)
                        if code is not None and self.player.press(code):
                            running = False
                    elif event.type == pygame.KEYUP:
                        code = keymap.get(event.key)
                        if code is not None:
                            self.player.release(code)
                if not running:
                    break
                self.tick(self.delta_time)
                surface = pygame.image.frombuffer(bytes(self.frame.data), size, "RGB")
                screen.blit(surface, (0, 0))
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(format_error(MapError(USAGE)), end="")
        return 1
    try:
        game = Game.from_scene(load_scene(args[0]))
        game.run()
    except CubError as error:
        print(format_error(error), end="")
        return 1
    print(format_error(CubError(GOODBYE, status=1)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
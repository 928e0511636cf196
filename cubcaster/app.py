"""Game window, input handling and the command-line entry point."""

from __future__ import annotations

import os
import sys
from array import array
from collections.abc import Mapping, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .cubfile import Level, load_level  # noqa: E402
from .debug import debug_move_player, draw_debug_frame  # noqa: E402
from .errors import CubError, report_error  # noqa: E402
from .model import (  # noqa: E402
    HEIGHT,
    KEY_A,
    KEY_D,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_W,
    PI,
    WIDTH,
    TextureKind,
)
from .movement import key_press, key_release, move_player  # noqa: E402
from .render import FrameBuffer, draw_frame  # noqa: E402
from .xpm import XpmImage, load_textures  # noqa: E402

DEBUG = False

_PYGAME_KEYS = {
    pygame.K_ESCAPE: KEY_ESC,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_a: KEY_A,
    pygame.K_s: KEY_S,
    pygame.K_d: KEY_D,
    pygame.K_w: KEY_W,
}


def translate_key(pygame_key: int) -> int | None:
    """Game key code for a pygame key, or None if the game does not use it."""
    return _PYGAME_KEYS.get(pygame_key)


def _frame_to_rgb(frame: FrameBuffer) -> bytes:
    raw = array("I", frame.pixels)
    data = raw.tobytes()
    size = raw.itemsize
    if sys.byteorder == "little":
        red, green, blue = 2, 1, 0
    else:
        red, green, blue = size - 3, size - 2, size - 1
    rgb = bytearray(3 * len(raw))
    rgb[0::3] = data[red::size]
    rgb[1::3] = data[green::size]
    rgb[2::3] = data[blue::size]
    return bytes(rgb)


class Game:
    """A running level: player state, textures and the frames drawn each tick."""

    def __init__(self, level: Level, textures: Mapping[TextureKind, XpmImage]) -> None:
        self.level = level
        self.scene = level.scene
        self.game_map = level.game_map
        self.player = level.player
        self.textures = dict(textures)
        self.frame = FrameBuffer()
        self.debug_frame = FrameBuffer()
        self.debug = False
        self.running = True

    def handle_key_down(self, key: int) -> bool:
        """Record a key press; returns True if it asks the game to close."""
        if key_press(self.player, key):
            self.running = False
            return True
        return False

    def handle_key_up(self, key: int) -> None:
        """Record a key release."""
        key_release(self.player, key)

    def tick(self) -> FrameBuffer:
        """Advance one frame and return the frame to show."""
        if self.debug:
            debug_move_player(self.player)
            draw_debug_frame(self.debug_frame, self.player, self.game_map, show_map=True)
        move_player(self.player, self.game_map)
        draw_frame(self.frame, self.player, self.game_map, self.textures, self.scene)
        return self.debug_frame if self.debug else self.frame

    def _reset_for_debug(self) -> None:
        player = self.player
        player.key_up = player.key_down = False
        player.key_left = player.key_right = False
        player.left_rotate = player.right_rotate = False
        player.x = WIDTH // 2
        player.y = HEIGHT // 2
        player.angle = PI / 2

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                key = translate_key(event.key)
                if key is not None:
                    self.handle_key_down(key)
            elif event.type == pygame.KEYUP:
                key = translate_key(event.key)
                if key is not None:
                    self.handle_key_up(key)

    def run(self, debug: bool = False) -> None:
        """Open the window and run until it is closed or Escape is pressed."""
        self.debug = debug
        if debug:
            self._reset_for_debug()
        pygame.init()
        try:
            try:
                screen = pygame.display.set_mode((WIDTH, HEIGHT))
            except pygame.error as exc:
                raise CubError("INIT", str(exc)) from exc
            pygame.display.set_caption("Debug" if debug else "Cub3D")
            while self.running:
                self._handle_events()
                if not self.running:
                    break
                frame = self.tick()
                surface = pygame.image.frombuffer(
                    _frame_to_rgb(frame), (frame.width, frame.height), "RGB"
                )
                screen.blit(surface, (0, 0))
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the level named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        level = load_level(args)
        textures = load_textures(level.scene)
        Game(level, textures).run(DEBUG)
    except CubError as error:
        report_error(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
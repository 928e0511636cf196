"""Frame buffer and textured wall, floor and ceiling drawing."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import NamedTuple

from .model import BLOCK, FOV, HEIGHT, WIDTH, GameMap, Player, Scene, TextureKind
from .raycast import RayHit, cast_ray, fixed_distance, texture_column
from .xpm import XpmImage


class FrameBuffer:
    """A width x height image of 0xRRGGBB colours, stored row by row."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame size must be positive")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; positions outside the frame are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color

    def pixel(self, x: int, y: int) -> int:
        """Colour at (x, y); IndexError outside the frame."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return self.pixels[y * self.width + x]

    def clear(self) -> None:
        """Set every pixel to black."""
        self.pixels = [0] * (self.width * self.height)

    def _fill_column(self, x: int, start: int, end: int, color: int) -> None:
        if not 0 <= x < self.width:
            return
        for y in range(max(start, 0), min(end, self.height)):
            self.pixels[y * self.width + x] = color


class WallSpan(NamedTuple):
    height: float
    start_y: int
    end_y: int


def wall_span(distance: float) -> WallSpan:
    """Projected wall height and its first and past-last screen rows."""
    if distance <= 0:
        raise ValueError("wall distance must be positive")
    height = (BLOCK * HEIGHT) / (distance * math.tan(FOV / 2))
    start_y = int((HEIGHT - height) / 2)
    end_y = int(start_y + height)
    return WallSpan(height, start_y, end_y)


def draw_column(
    frame: FrameBuffer,
    column: int,
    hit: RayHit,
    player: Player,
    textures: Mapping[TextureKind, XpmImage],
    scene: Scene,
) -> None:
    """Draw ceiling, textured wall slice and floor for one screen column."""
    span = wall_span(fixed_distance(player, hit.x, hit.y))
    tex_x = texture_column(hit.side, player, hit.x, hit.y)
    texture = textures[hit.kind]

    frame._fill_column(column, 0, span.start_y, scene.ceiling_color)
    frame._fill_column(column, span.end_y, HEIGHT, scene.floor_color)

    step = BLOCK / span.height
    tex_pos = -span.start_y * step if span.start_y < 0 else 0.0
    column_x = tex_x % texture.width
    for y in range(max(span.start_y, 0), min(span.end_y, HEIGHT)):
        tex_y = int(tex_pos) % BLOCK
        frame.put_pixel(column, y, texture.pixel(column_x, tex_y % texture.height))
        tex_pos += step


def draw_frame(
    frame: FrameBuffer,
    player: Player,
    game_map: GameMap,
    textures: Mapping[TextureKind, XpmImage],
    scene: Scene,
) -> None:
    """Clear ``frame`` and render the whole view from ``player``."""
    frame.clear()
    for column in range(WIDTH):
        hit = cast_ray(player, game_map, column)
        draw_column(frame, column, hit, player, textures, scene)
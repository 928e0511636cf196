"""Debug view: a top-down map with marched rays, or plain untextured walls."""

from __future__ import annotations

import math
from collections.abc import Callable

from .model import BLOCK, GREEN, PI, WALL, GameMap, Player
from .raycast import fixed_distance
from .render import FrameBuffer

RAY_COLOR = 0xFF0000
DEBUG_SPEED = 1.0
DEBUG_ANGLE_SPEED = 0.02
PLAYER_MARK_SIZE = 5


def draw_square(frame: FrameBuffer, x: float, y: float, size: int, color: int) -> None:
    """Draw the outline of a ``size`` square whose top-left corner is (x, y).

    The far corner (x + size, y + size) is left undrawn.
    """
    x, y = int(x), int(y)
    for i in range(size):
        frame.put_pixel(x + i, y, color)
        frame.put_pixel(x, y + i, color)
        frame.put_pixel(x + size, y + i, color)
        frame.put_pixel(x + i, y + size, color)


def draw_map(frame: FrameBuffer, game_map: GameMap, color: int = GREEN) -> None:
    """Outline every wall block of ``game_map``."""
    for y, row in enumerate(game_map.rows):
        for x, ch in enumerate(row):
            if ch == WALL:
                draw_square(frame, x * BLOCK, y * BLOCK, BLOCK, color)


def touch(px: float, py: float, game_map: GameMap) -> bool:
    """True if pixel position (px, py) is inside a wall block."""
    return game_map.is_wall_at(px, py)


def debug_move_player(player: Player) -> None:
    """Move and turn the player with the debug view's fixed speeds, ignoring walls."""
    cos_angle = math.cos(player.angle)
    sin_angle = math.sin(player.angle)

    if player.left_rotate:
        player.angle -= DEBUG_ANGLE_SPEED
    if player.right_rotate:
        player.angle += DEBUG_ANGLE_SPEED
    if player.angle > 2 * PI:
        player.angle -= 2 * PI
    if player.angle < 0:
        player.angle += 2 * PI

    if player.key_up:
        player.x += cos_angle * DEBUG_SPEED
        player.y += sin_angle * DEBUG_SPEED
    if player.key_down:
        player.x -= cos_angle * DEBUG_SPEED
        player.y -= sin_angle * DEBUG_SPEED
    if player.key_left:
        player.x += sin_angle * DEBUG_SPEED
        player.y -= cos_angle * DEBUG_SPEED
    if player.key_right:
        player.x -= sin_angle * DEBUG_SPEED
        player.y += cos_angle * DEBUG_SPEED


def _march(
    player: Player,
    game_map: GameMap,
    angle: float,
    on_step: Callable[[float, float], None] | None,
) -> tuple[float, float]:
    cos_angle = math.cos(angle)
    sin_angle = math.sin(angle)
    x, y = player.x, player.y
    while not touch(x, y, game_map):
        if on_step is not None:
            on_step(x, y)
        x += cos_angle
        y += sin_angle
    return x, y


def march_ray(player: Player, game_map: GameMap, angle: float) -> tuple[float, float]:
    """Step one pixel at a time from the player along ``angle``.

    Returns the first position that lies inside a wall.
    """
    return _march(player, game_map, angle, None)


def _draw_wall_slice(
    frame: FrameBuffer, player: Player, column: int, hit: tuple[float, float]
) -> None:
    distance = fixed_distance(player, hit[0], hit[1])
    if distance <= 0:
        return
    wall_height = (BLOCK / distance) * (frame.width / 2)
    start_y = int((frame.height - wall_height) / 2)
    end_y = int(start_y + wall_height)
    for y in range(max(start_y, 0), min(end_y, frame.height)):
        frame.put_pixel(column, y, GREEN)


def draw_debug_frame(
    frame: FrameBuffer, player: Player, game_map: GameMap, show_map: bool
) -> None:
    """Clear ``frame`` and draw the debug view.

    With ``show_map`` the player mark, wall outlines and every ray's path are
    drawn from above; otherwise each column gets a flat green wall slice.
    """
    frame.clear()
    if show_map:
        draw_square(frame, player.x, player.y, PLAYER_MARK_SIZE, GREEN)
        draw_map(frame, game_map, GREEN)

    def plot(x: float, y: float) -> None:
        frame.put_pixel(int(x), int(y), RAY_COLOR)

    fraction = PI / 3 / frame.width
    angle = player.angle - PI / 6
    for column in range(frame.width):
        if show_map:
            _march(player, game_map, angle, plot)
        else:
            _draw_wall_slice(frame, player, column, march_ray(player, game_map, angle))
        angle += fraction
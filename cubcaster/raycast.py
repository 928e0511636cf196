"""Grid ray casting: finding where each screen column's ray meets a wall."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .model import BLOCK, FOV, WIDTH, GameMap, Player, Side, TextureKind

TEXTURE_SIZE = 64


@dataclass(frozen=True)
class RayHit:
    """First wall pixel reached by a ray, the grid line it crossed and its texture."""

    x: int
    y: int
    side: Side
    kind: TextureKind


def fixed_distance(player: Player, x: float, y: float) -> float:
    """Distance from the player to (x, y) along the view direction.

    Projecting onto the view direction removes the fish-eye distortion.
    """
    delta_x = x - player.x
    delta_y = y - player.y
    angle = math.atan2(delta_y, delta_x) - player.angle
    return math.hypot(delta_x, delta_y) * math.cos(angle)


def texture_column(side: Side, player: Player, ray_x: float, ray_y: float) -> int:
    """Column of a wall texture to draw for a hit at (ray_x, ray_y)."""
    wall_x = ray_y if side == Side.VERTICAL else ray_x
    wall_x /= BLOCK
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * TEXTURE_SIZE)
    if (side == Side.VERTICAL and ray_x < player.x) or (
        side == Side.HORIZONTAL and ray_y > player.y
    ):
        tex_x = TEXTURE_SIZE - tex_x - 1
    return min(max(tex_x, 0), TEXTURE_SIZE - 1)


def wall_texture_kind(side: Side, player: Player, ray_x: float, ray_y: float) -> TextureKind:
    """Which wall texture faces the player at the hit point."""
    if side == Side.VERTICAL:
        return TextureKind.WE if ray_x < player.x else TextureKind.EA
    return TextureKind.NO if ray_y < player.y else TextureKind.SO


def _ray_direction(player: Player, column: int) -> tuple[float, float]:
    camera_x = 2.0 * column / WIDTH - 1.0
    angle = player.angle + math.atan(camera_x * math.tan(FOV / 2))
    return math.cos(angle), math.sin(angle)


def _step_length(direction: float) -> float:
    return math.inf if direction == 0 else abs(1 / direction)


def cast_ray(player: Player, game_map: GameMap, column: int) -> RayHit:
    """Trace the ray for screen ``column`` pixel by pixel until it enters a wall."""
    dir_x, dir_y = _ray_direction(player, column)
    delta_x = _step_length(dir_x)
    delta_y = _step_length(dir_y)
    map_x = int(player.x)
    map_y = int(player.y)

    if dir_x < 0:
        step_x = -1
        side_dist_x = (player.x - map_x) * delta_x
    else:
        step_x = 1
        side_dist_x = (map_x + 1.0 - player.x) * delta_x
    if dir_y < 0:
        step_y = -1
        side_dist_y = (player.y - map_y) * delta_y
    else:
        step_y = 1
        side_dist_y = (map_y + 1.0 - player.y) * delta_y

    side = Side.HORIZONTAL
    while not game_map.is_wall_at(map_x, map_y):
        if side_dist_x < side_dist_y:
            side_dist_x += delta_x
            map_x += step_x
            side = Side.VERTICAL
        else:
            side_dist_y += delta_y
            map_y += step_y
            side = Side.HORIZONTAL
    return RayHit(map_x, map_y, side, wall_texture_kind(side, player, map_x, map_y))
"""Keyboard state, turning, movement and wall collision for the player."""

from __future__ import annotations

import math
from dataclasses import replace

from .model import (
    BLOCK,
    KEY_A,
    KEY_D,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_W,
    PI,
    PLAYER_SIZE,
    WALL,
    GameMap,
    Player,
)

_KEY_FLAGS = {
    KEY_W: "key_up",
    KEY_S: "key_down",
    KEY_D: "key_right",
    KEY_A: "key_left",
    KEY_LEFT: "left_rotate",
    KEY_RIGHT: "right_rotate",
}


def key_press(player: Player, key: int) -> bool:
    """Record a key press. Returns True if the key asks to close the game."""
    flag = _KEY_FLAGS.get(key)
    if flag is not None:
        setattr(player, flag, True)
    return key == KEY_ESC


def key_release(player: Player, key: int) -> None:
    """Record a key release."""
    flag = _KEY_FLAGS.get(key)
    if flag is not None:
        setattr(player, flag, False)


def movement_speed(player: Player) -> float:
    """Speed for this step: full with one movement key held, slower otherwise."""
    moves = sum((player.key_up, player.key_down, player.key_right, player.key_left))
    if moves != 1:
        return player.speed / 1.5
    return player.speed


def would_collide(game_map: GameMap, x: float, y: float) -> bool:
    """True if the player's square at (x, y) overlaps a wall or leaves the map."""
    ix, iy = int(x), int(y)
    left = int((ix - PLAYER_SIZE) / BLOCK)
    right = int((ix + PLAYER_SIZE) / BLOCK)
    top = int((iy - PLAYER_SIZE) / BLOCK)
    bottom = int((iy + PLAYER_SIZE) / BLOCK)
    for cx, cy in ((left, top), (right, top), (left, bottom), (right, bottom)):
        try:
            if game_map.cell(cx, cy) == WALL:
                return True
        except IndexError:
            return True
    return False


def turn_player(player: Player) -> None:
    """Apply held rotation keys and keep the angle within one turn."""
    if player.left_rotate:
        player.angle -= player.angle_speed
    if player.right_rotate:
        player.angle += player.angle_speed
    if player.angle > 2 * PI:
        player.angle -= 2 * PI
    if player.angle < 0:
        player.angle += 2 * PI


def _step(player: Player, cos_angle: float, sin_angle: float, speed: float) -> tuple[float, float]:
    x, y = player.x, player.y
    if player.key_up:
        x += cos_angle * speed
        y += sin_angle * speed
    if player.key_down:
        x -= cos_angle * speed
        y -= sin_angle * speed
    if player.key_left:
        x += sin_angle * speed
        y -= cos_angle * speed
    if player.key_right:
        x -= sin_angle * speed
        y += cos_angle * speed
    return x, y


def move_player(player: Player, game_map: GameMap) -> None:
    """Advance the player by one frame of input.

    The step uses the angle held before this frame's turn. Movement is
    refused when a full-speed probe step would reach a wall.
    """
    cos_angle = math.cos(player.angle)
    sin_angle = math.sin(player.angle)
    turn_player(player)
    probe_x, probe_y = _step(replace(player), cos_angle, sin_angle, player.speed)
    if would_collide(game_map, probe_x, probe_y):
        return
    player.x, player.y = _step(player, cos_angle, sin_angle, movement_speed(player))
import math

import pytest

from cubcaster.debug import (
    RAY_COLOR,
    debug_move_player,
    draw_debug_frame,
    draw_map,
    draw_square,
    march_ray,
    touch,
)
from cubcaster.model import BLOCK, GREEN, PI, GameMap, Player
from cubcaster.render import FrameBuffer

SMALL = GameMap(["111", "101", "111"])
ROOM = GameMap(
    [
        "1111111",
        "1000001",
        "1000001",
        "1000001",
        "1000001",
        "1000001",
        "1111111",
    ]
)
COLOR = 0x123456


def test_draw_square_outline_only():
    frame = FrameBuffer(20, 20)
    draw_square(frame, 2, 2, 5, COLOR)
    assert frame.pixel(2, 2) == COLOR
    assert frame.pixel(6, 2) == COLOR
    assert frame.pixel(7, 2) == COLOR
    assert frame.pixel(2, 7) == COLOR
    assert frame.pixel(4, 4) == 0
    assert frame.pixel(7, 7) == 0


def test_draw_square_clips_at_frame_edge():
    frame = FrameBuffer(4, 4)
    draw_square(frame, -2, -2, 10, COLOR)
    assert frame.pixel(0, 0) == 0
    assert all(p in (0, COLOR) for p in frame.pixels)


def test_draw_map_outlines_walls_only():
    frame = FrameBuffer(200, 200)
    draw_map(frame, GameMap(["10", "01"]), COLOR)
    assert frame.pixel(0, 0) == COLOR
    assert frame.pixel(BLOCK, BLOCK) == COLOR
    assert frame.pixel(BLOCK + BLOCK // 2, 0) == 0
    assert frame.pixel(BLOCK + BLOCK // 2, BLOCK + BLOCK // 2) == 0


def test_touch():
    centre = BLOCK + BLOCK / 2
    assert touch(centre, centre, SMALL) is False
    assert touch(1, 1, SMALL) is True
    assert touch(10 * BLOCK, centre, SMALL) is True


def test_debug_move_forward():
    player = Player(x=96.0, y=96.0, angle=0.0, key_up=True)
    debug_move_player(player)
    assert player.x == pytest.approx(96.0 + 1.0)
    assert player.y == pytest.approx(96.0)


def test_debug_move_backward_is_reverse_of_forward():
    player = Player(x=96.0, y=96.0, angle=1.0, key_up=True)
    debug_move_player(player)
    player.key_up = False
    player.key_down = True
    debug_move_player(player)
    assert player.x == pytest.approx(96.0)
    assert player.y == pytest.approx(96.0)


def test_debug_rotation_and_wrap():
    player = Player(angle=1.0, right_rotate=True)
    debug_move_player(player)
    assert player.angle == pytest.approx(1.02)

    player = Player(angle=0.01, left_rotate=True)
    debug_move_player(player)
    assert player.angle == pytest.approx(0.01 - 0.02 + 2 * PI)
    assert 0 <= player.angle <= 2 * PI


def test_march_ray_stops_at_first_wall_pixel():
    player = Player(x=96.0, y=96.0, angle=0.0)
    assert march_ray(player, SMALL, 0.0) == (128.0, 96.0)


def test_march_ray_end_is_in_wall_for_any_angle():
    player = Player(x=96.0, y=96.0)
    for step in range(8):
        angle = step * PI / 4
        x, y = march_ray(player, SMALL, angle)
        assert touch(x, y, SMALL)
        assert math.hypot(x - 96.0, y - 96.0) < 3 * BLOCK


def test_draw_debug_frame_walls_view():
    frame = FrameBuffer()
    player = Player(x=224.0, y=224.0, angle=3 * PI / 2)
    draw_debug_frame(frame, player, ROOM, show_map=False)
    assert set(frame.pixels) <= {0, GREEN}
    assert frame.pixel(frame.width // 2, frame.height // 2) == GREEN
    assert frame.pixel(frame.width // 2, 0) == 0


def test_draw_debug_frame_map_view():
    frame = FrameBuffer()
    player = Player(x=224.0, y=224.0, angle=3 * PI / 2)
    draw_debug_frame(frame, player, ROOM, show_map=True)
    assert frame.pixel(0, 0) == GREEN
    assert frame.pixel(225, 224) == GREEN
    assert RAY_COLOR in frame.pixels


def test_draw_debug_frame_clears_previous_content():
    frame = FrameBuffer()
    frame.put_pixel(frame.width - 1, frame.height - 1, COLOR)
    player = Player(x=224.0, y=224.0, angle=3 * PI / 2)
    draw_debug_frame(frame, player, ROOM, show_map=False)
    assert frame.pixel(frame.width - 1, frame.height - 1) == 0
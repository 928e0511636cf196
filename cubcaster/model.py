"""Game constants and the plain data the parser and renderer share."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum

PI = math.pi
FOV = 60.0 * PI / 180.0

KEY_ESC = 65307
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_W = 119

WALL = "1"
FLOOR = "0"
BLOCK = 64
PLAYER_SIZE = 6

WIDTH = 1280
HEIGHT = 720

PURPLE = 0x660033
GREEN = 0x00FF00
BLUE = 0x6666FF
GREY = 0xA0A0A0
PINK = 0xFF66B2


class TextureKind(Enum):
    """Scene elements that a .cub file can declare."""

    NO = "NO"
    SO = "SO"
    EA = "EA"
    WE = "WE"
    F = "F"
    C = "C"

    @property
    def is_wall(self) -> bool:
        return self in _WALL_KINDS


_WALL_KINDS = frozenset({TextureKind.NO, TextureKind.SO, TextureKind.EA, TextureKind.WE})
_COLOR_KINDS = frozenset({TextureKind.F, TextureKind.C})


class Side(IntEnum):
    """Which kind of grid line a ray crossed last."""

    VERTICAL = 2
    HORIZONTAL = 3


_START_ANGLES = {
    "N": 3 * (PI / 2),
    "E": 0.0,
    "S": PI / 2,
    "W": PI,
}


@dataclass
class Player:
    """Player position (in pixels), view angle and held movement keys."""

    x: float = 0.0
    y: float = 0.0
    angle: float = PI / 2
    speed: float = 2.0
    angle_speed: float = 0.015
    key_up: bool = False
    key_down: bool = False
    key_left: bool = False
    key_right: bool = False
    left_rotate: bool = False
    right_rotate: bool = False

    def set_starting_angle(self, direction: str) -> None:
        """Face the compass direction given by N, E, S or W; others are ignored."""
        angle = _START_ANGLES.get(direction)
        if angle is not None:
            self.angle = angle


@dataclass
class Scene:
    """Elements read from a .cub file: wall texture paths, colours and map rows.

    A colour of 0 counts as not yet set, as the file format gives it no
    other marker.
    """

    paths: dict[TextureKind, str] = field(default_factory=dict)
    floor_color: int = 0
    ceiling_color: int = 0
    map_rows: list[str] | None = None

    def is_complete(self) -> bool:
        """True once both colours and all four wall textures are set."""
        return bool(
            self.ceiling_color
            and self.floor_color
            and all(self.paths.get(kind) for kind in _WALL_KINDS)
        )

    def is_first_occurrence(self, kind: TextureKind) -> bool:
        """True if ``kind`` has not been set yet."""
        if kind is TextureKind.F:
            return not self.floor_color
        if kind is TextureKind.C:
            return not self.ceiling_color
        return not self.paths.get(kind)

    def set_texture_path(self, kind: TextureKind, path: str) -> None:
        if kind not in _WALL_KINDS:
            raise ValueError(f"{kind.value} is not a wall texture")
        self.paths[kind] = path

    def set_color(self, kind: TextureKind, color: int) -> None:
        if kind is TextureKind.F:
            self.floor_color = color
        elif kind is TextureKind.C:
            self.ceiling_color = color
        else:
            raise ValueError(f"{kind.value} is not a colour element")

    def texture_path(self, kind: TextureKind) -> str | None:
        if kind not in _WALL_KINDS:
            raise ValueError(f"{kind.value} is not a wall texture")
        return self.paths.get(kind)


@dataclass
class GameMap:
    """Rectangular grid of map characters, one string per row."""

    rows: list[str] = field(default_factory=list)

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def cell(self, x: int, y: int) -> str:
        """Character at column ``x`` of row ``y``; IndexError outside the grid."""
        if y < 0 or x < 0 or y >= len(self.rows) or x >= len(self.rows[y]):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def is_wall_at(self, px: float, py: float) -> bool:
        """True if pixel position (px, py) lies in a wall block.

        Anything outside the grid counts as wall.
        """
        x = int(px / BLOCK)
        y = int(py / BLOCK)
        try:
            return self.cell(x, y) == WALL
        except IndexError:
            return True
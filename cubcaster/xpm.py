"""Reading XPM images used as wall textures."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from .errors import LOAD_MSG, CubError
from .model import Scene, TextureKind

TRANSPARENT = 0xFF000000

_STRING = re.compile(r'"((?:[^"\\]|\\.)*)"')
_KEYS = frozenset({"c", "m", "g", "g4", "s"})
_KEY_PREFERENCE = ("c", "g", "g4", "m")
_NAMED_COLORS = {
    "black": 0x000000,
    "white": 0xFFFFFF,
    "red": 0xFF0000,
    "green": 0x00FF00,
    "blue": 0x0000FF,
    "yellow": 0xFFFF00,
    "cyan": 0x00FFFF,
    "magenta": 0xFF00FF,
    "gray": 0xBEBEBE,
    "grey": 0xBEBEBE,
}


@dataclass(frozen=True)
class XpmImage:
    """Decoded image: ``pixels[y][x]`` holds a 0xRRGGBB colour."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Colour at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.pixels[y][x]


def _color_value(spec: str) -> int:
    name = spec.strip()
    if name.lower() == "none":
        return TRANSPARENT
    if name.startswith("#"):
        digits = name[1:]
        if not digits or len(digits) % 3 or len(digits) > 12:
            raise ValueError(f"bad colour {spec!r}")
        try:
            int(digits, 16)
        except ValueError:
            raise ValueError(f"bad colour {spec!r}") from None
        size = len(digits) // 3
        value = 0
        for start in range(0, len(digits), size):
            channel = digits[start : start + size]
            byte = int(channel, 16) << 4 if size == 1 else int(channel[:2], 16)
            value = (value << 8) | byte
        return value
    key = name.lower().replace(" ", "")
    if key not in _NAMED_COLORS:
        raise ValueError(f"unknown colour {spec!r}")
    return _NAMED_COLORS[key]


def _parse_color_line(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise ValueError("colour line too short")
    code = line[:cpp]
    specs: dict[str, list[str]] = {}
    key: str | None = None
    for token in line[cpp:].split():
        if token in _KEYS and (key is None or specs[key]):
            key = token
            specs[key] = []
        elif key is None:
            raise ValueError(f"colour line without key: {line!r}")
        else:
            specs[key].append(token)
    for preferred in _KEY_PREFERENCE:
        if specs.get(preferred):
            return code, _color_value(" ".join(specs[preferred]))
    raise ValueError(f"no usable colour in {line!r}")


def parse_xpm(text: str) -> XpmImage:
    """Decode the text of an XPM file; ValueError if it is malformed."""
    strings = _STRING.findall(text)
    if not strings:
        raise ValueError("no XPM data")
    header = strings[0].split()
    if len(header) < 4:
        raise ValueError("bad XPM header")
    try:
        width, height, ncolors, cpp = (int(value) for value in header[:4])
    except ValueError:
        raise ValueError("bad XPM header") from None
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise ValueError("bad XPM header")
    if len(strings) < 1 + ncolors + height:
        raise ValueError("XPM data is truncated")

    palette = dict(_parse_color_line(line, cpp) for line in strings[1 : 1 + ncolors])
    rows = []
    for line in strings[1 + ncolors : 1 + ncolors + height]:
        if len(line) != width * cpp:
            raise ValueError("XPM row has the wrong length")
        try:
            rows.append(
                tuple(palette[line[start : start + cpp]] for start in range(0, len(line), cpp))
            )
        except KeyError as exc:
            raise ValueError(f"unknown pixel code {exc.args[0]!r}") from None
    return XpmImage(width=width, height=height, pixels=tuple(rows))


def load_xpm(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return parse_xpm(handle.read())


def load_textures(scene: Scene) -> dict[TextureKind, XpmImage]:
    """Load the four wall textures named by ``scene``."""
    textures = {}
    for kind in (TextureKind.NO, TextureKind.SO, TextureKind.WE, TextureKind.EA):
        path = scene.texture_path(kind)
        if not path:
            raise CubError("Textures", LOAD_MSG)
        try:
            textures[kind] = load_xpm(path)
        except (OSError, ValueError) as exc:
            raise CubError("Textures", LOAD_MSG) from exc
    return textures
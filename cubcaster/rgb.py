"""Floor and ceiling colour elements ("F r,g,b" and "C r,g,b")."""

from __future__ import annotations

from .errors import DUP_MSG, RGB_MSG, RGBV_MSG, UNX_MSG, CubError
from .intparse import parse_int_no_overflow
from .model import Scene, TextureKind
from .parse_utils import SPACES

_LINE_CHARS = frozenset("0123456789, \n")


def rgb_to_int(red: int, green: int, blue: int) -> int:
    """Pack three 0-255 channels into a 0xRRGGBB integer."""
    return (red << 16) | (green << 8) | blue


def validate_rgb_line(line: str) -> str:
    """Check the text after the F/C identifier and return it trimmed.

    Raises CubError on a character that may not appear or on two commas in
    a row.
    """
    trimmed = line.strip(SPACES)
    if not trimmed or not trimmed[0].isdigit() or trimmed.endswith(","):
        raise CubError("RGB", UNX_MSG)
    if any(ch not in _LINE_CHARS for ch in trimmed):
        raise CubError("RGB", UNX_MSG)
    if ",," in trimmed:
        raise CubError("RGB", RGB_MSG)
    return trimmed


def parse_rgb_values(text: str) -> tuple[int, int, int]:
    """Parse exactly three comma-separated channel values in 0-255."""
    pieces = [piece for piece in text.strip(SPACES).split(",") if piece]
    if len(pieces) != 3:
        raise CubError("RGB", RGB_MSG)
    values = []
    for piece in pieces:
        trimmed = piece.strip(SPACES)
        if not trimmed or " " in trimmed:
            raise CubError("RGB", RGB_MSG)
        value, out_of_range = parse_int_no_overflow(piece)
        if out_of_range or not 0 <= value <= 255:
            raise CubError("RGB", RGBV_MSG)
        values.append(value)
    return values[0], values[1], values[2]


def parse_rgb(scene: Scene, line: str) -> int | None:
    """Parse a colour line whose first character is its identifier.

    Stores the colour on ``scene`` and returns it. A line that starts with
    neither F nor C is checked but stores nothing, and None is returned.
    """
    body = line[1:]
    validate_rgb_line(body)
    color = rgb_to_int(*parse_rgb_values(body))
    identifier = line[:1]
    if identifier not in ("F", "C"):
        return None
    kind = TextureKind(identifier)
    if not scene.is_first_occurrence(kind):
        raise CubError("RGB", DUP_MSG)
    scene.set_color(kind, color)
    return color
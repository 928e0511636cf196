"""Error type and error reporting for the map loader and the game."""

from __future__ import annotations

import sys
from typing import TextIO

PROGRAM_NAME = "cub3D"

ARG_MSG = "Wrong number of arguments"
USE_MSG = " (Usage: ./cub3D map_name.cub)"
EXT_MSG = "Wrong file extension"
DIR_MSG = "File is directory"
TXT_MSG = "Bad wall texture"
MAP_MSG = "Invalid map"
MEM_MSG = "Error allocating memory"
DUP_MSG = "Duplicate element encountered"
UNX_MSG = "Unexpected character encountered"
RGBV_MSG = "Incompatible value. Must be 0-255"
RGB_MSG = "Incorrect format"
NOFILE_MSG = "No filename given"
FINAL_MSG = "Element missing or map not last element in file"
MIS_MSG = "Elements missing"
GAP_MSG = "Empty line found within map"
PLAYS_MSG = "More than one player found"
NOPLAY_MSG = "No player found"
FLR_MSG = "Floor/player tiles must be surrounded by walls"
LOAD_MSG = "Error loading element"


class CubError(Exception):
    """A failure while loading or running a level.

    ``prefix`` names the part that failed (for example ``"Map"``) and
    ``message`` says what went wrong; either may be ``None``.
    """

    def __init__(self, prefix: str | None, message: str | None) -> None:
        super().__init__(prefix, message)
        self.prefix = prefix
        self.message = message

    def __str__(self) -> str:
        return ": ".join(part for part in (self.prefix, self.message) if part)


def format_error(prefix: str | None, message: str | None) -> str:
    """Return the full text reported for an error, trailing newline included."""
    text = "Error\n" + PROGRAM_NAME
    if prefix:
        text += ": " + prefix
    if message:
        text += ": " + message
    return text + "\n"


def report_error(error: CubError, stream: TextIO | None = None) -> None:
    """Write ``error`` to ``stream`` (standard error by default)."""
    target = sys.stderr if stream is None else stream
    target.write(format_error(error.prefix, error.message))
    target.flush()
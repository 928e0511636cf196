"""Reading a .cub level file into a scene, a map grid and a placed player."""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from contextlib import closing
from dataclasses import dataclass

from .errors import ARG_MSG, DIR_MSG, EXT_MSG, MIS_MSG, UNX_MSG, USE_MSG, CubError
from .mapgrid import parse_map, trim_map, validate_map
from .model import GameMap, Player, Scene, TextureKind
from .parse_utils import SPACES, is_ext_valid, is_file_dir
from .rgb import parse_rgb
from .texture import parse_texture

_TEXTURE_IDS = (TextureKind.NO, TextureKind.EA, TextureKind.SO, TextureKind.WE)


@dataclass
class Level:
    """A fully parsed and validated level."""

    scene: Scene
    game_map: GameMap
    player: Player


def read_lines(path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the lines of ``path``, each keeping its trailing newline.

    Only ``\\n`` ends a line; other control characters stay in the text.
    """
    with open(path, "rb") as handle:
        for raw in handle:
            yield raw.decode("utf-8", errors="surrogateescape")


def check_file(path: str) -> None:
    """Raise CubError unless ``path`` is a readable .cub file."""
    if not is_ext_valid(path, ".cub"):
        raise CubError("File", EXT_MSG + USE_MSG)
    if is_file_dir(path):
        raise CubError("File", DIR_MSG)
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise CubError("File", exc.strerror) from exc


def parse_line(scene: Scene, line: str, lines: Iterator[str]) -> None:
    """Apply one line of a .cub file to ``scene``.

    A line that starts the map takes every remaining line from ``lines``.
    Blank lines are ignored.
    """
    text = line.lstrip(SPACES)
    if not text:
        return
    for kind in _TEXTURE_IDS:
        if text.startswith(kind.value):
            parse_texture(scene, text, kind)
            return
    if text[0] in ("F", "C"):
        parse_rgb(scene, line)
        return
    if text[0] == "1":
        parse_map(scene, line, lines)
        return
    raise CubError("Map", UNX_MSG)


def parse_map_file(path: str | os.PathLike[str]) -> Scene:
    """Parse every element of the file at ``path`` into a new Scene."""
    scene = Scene()
    try:
        lines = read_lines(path)
        with closing(lines):
            for line in lines:
                parse_line(scene, line, lines)
    except OSError as exc:
        raise CubError("File", exc.strerror) from exc
    if not scene.is_complete() or scene.map_rows is None:
        raise CubError("File", MIS_MSG)
    return scene


def load_level(argv: Sequence[str]) -> Level:
    """Load the level named by the single command-line argument in ``argv``.

    ``argv`` holds the arguments without the program name.
    """
    if len(argv) != 1:
        raise CubError(None, ARG_MSG + USE_MSG)
    path = argv[0]
    check_file(path)
    scene = parse_map_file(path)
    game_map = trim_map(scene.map_rows or [])
    player = validate_map(game_map, Player())
    return Level(scene=scene, game_map=game_map, player=player)
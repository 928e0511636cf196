"""Reading, normalising and validating the map grid of a .cub file."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import (
    FINAL_MSG,
    FLR_MSG,
    GAP_MSG,
    MAP_MSG,
    NOPLAY_MSG,
    PLAYS_MSG,
    UNX_MSG,
    CubError,
)
from .intparse import INT_MAX
from .model import BLOCK, GameMap, Player, Scene
from .parse_utils import (
    FLOOR_CHARS,
    NEAR_CHARS,
    PLAYER_CHARS,
    is_valid_char,
    isspace_not_nl,
    last_usable_char_index,
)

_NEIGHBOURS = ((-1, -1), (0, -1), (1, -1), (-1, 0), (1, 0), (-1, 1), (0, 1), (1, 1))


def has_internal_empty_lines(text: str) -> bool:
    """True if a blank line sits between two lines that hold content."""
    found_content = False
    last_line_was_empty = False
    for line in text.split("\n"):
        if any(not isspace_not_nl(ch) for ch in line):
            if found_content and last_line_was_empty:
                return True
            found_content = True
            last_line_was_empty = False
        elif found_content:
            last_line_was_empty = True
    return False


def trim_trailing_space(text: str) -> str:
    """``text`` without trailing whitespace."""
    return text[: last_usable_char_index(text) + 1]


def parse_map(scene: Scene, first_line: str, lines: Iterable[str]) -> list[str]:
    """Collect the map from ``first_line`` and all remaining ``lines``.

    The map must come after every other element. The rows are stored on
    ``scene`` and returned.
    """
    if not scene.is_complete():
        raise CubError("Map", FINAL_MSG)
    text = first_line + "".join(lines)
    if has_internal_empty_lines(text):
        raise CubError("Map", GAP_MSG)
    rows = [row for row in trim_trailing_space(text).split("\n") if row]
    scene.map_rows = rows
    return rows


def find_shortest_lead(rows: list[str]) -> int:
    """Smallest number of leading blanks over all rows (INT_MAX if none)."""
    return min(
        (len(row) - len(row.lstrip(" \t\f\r\v")) for row in rows),
        default=INT_MAX,
    )


def trim_chars_from_start(text: str | None, count: int) -> str | None:
    """``text`` without its first ``count`` characters, or None if nothing is left."""
    if text is None or count >= len(text):
        return None
    return text[count:]


def find_longest_usable_string(rows: list[str]) -> int:
    """Length of the longest row once trailing whitespace is ignored."""
    return max((last_usable_char_index(row) for row in rows), default=-1) + 1


def trim_map(rows: list[str]) -> GameMap:
    """Strip the common blank lead and pad every row with spaces to one width."""
    lead = find_shortest_lead(rows)
    if lead > 0:
        trimmed = []
        for row in rows:
            shortened = trim_chars_from_start(row, lead)
            if shortened is None:
                raise CubError("Map", MAP_MSG)
            trimmed.append(shortened)
        rows = trimmed
    width = find_longest_usable_string(rows)
    return GameMap([row[:width].ljust(width) for row in rows])


def _neighbours_valid(game_map: GameMap, x: int, y: int) -> bool:
    for dx, dy in _NEIGHBOURS:
        try:
            ch = game_map.cell(x + dx, y + dy)
        except IndexError:
            return False
        if ch not in NEAR_CHARS:
            return False
    return True


def validate_map(game_map: GameMap, player: Player) -> Player:
    """Check the map characters and place ``player`` on its start tile.

    Every floor or player tile must be enclosed on all eight sides by floor,
    wall or player tiles, and there must be exactly one player tile.
    """
    player_found = False
    height, width = game_map.height, game_map.width
    for y, row in enumerate(game_map.rows):
        for x, ch in enumerate(row):
            if not is_valid_char(ch):
                raise CubError("Map:", UNX_MSG)
            if ch not in FLOOR_CHARS:
                continue
            if ch in PLAYER_CHARS:
                if player_found:
                    raise CubError("Map", PLAYS_MSG)
                player.x = x * BLOCK + BLOCK // 2
                player.y = y * BLOCK + BLOCK // 2
                player.set_starting_angle(ch)
                player_found = True
            if y == 0 or y + 1 == height or x == 0 or x + 1 == width:
                raise CubError("Map", FLR_MSG)
            if not _neighbours_valid(game_map, x, y):
                raise CubError("Map", FLR_MSG)
    if not player_found:
        raise CubError("Map", NOPLAY_MSG)
    return player
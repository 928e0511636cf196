"""Small character and file helpers used while parsing a .cub file."""

from __future__ import annotations

import os

SPACES = " \t\n\v\f\r"
SPACES_NOT_NL = " \t\f\r\v"
VALID_CHARS = " 10NSEW"
FLOOR_CHARS = "0NSEW"
NEAR_CHARS = "10NSEW"
PLAYER_CHARS = "NSEW"


def is_line_only_spaces(line: str) -> bool:
    """True if ``line`` holds nothing but whitespace."""
    return all(ch in SPACES for ch in line)


def is_file_dir(path: str | os.PathLike[str] | None) -> bool:
    """True if ``path`` names a directory."""
    if not path:
        return False
    return os.path.isdir(path)


def is_ext_valid(path: str | None, ext: str | None) -> bool:
    """True if ``path`` ends with the extension ``ext``."""
    if not path or not ext:
        return False
    return path.endswith(ext)


def is_valid_char(char: str) -> bool:
    """True if ``char`` may appear in a map row."""
    return len(char) == 1 and char in VALID_CHARS


def isspace_not_nl(char: str) -> bool:
    """True for whitespace other than a newline."""
    return len(char) == 1 and char in SPACES_NOT_NL


def last_usable_char_index(text: str | None) -> int:
    """Index of the last non-whitespace character, or -1 if there is none."""
    if text is None:
        return -1
    return len(text.rstrip(SPACES)) - 1


def format_matrix(matrix: list[str]) -> str:
    """Render map rows between ':' markers for inspection."""
    lines = ["", "Map Matrix", ": <- start/end of line", ""]
    lines.extend(f":{row}:" for row in matrix)
    lines.append("")
    return "\n".join(lines) + "\n"
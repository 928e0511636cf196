"""Wall texture elements ("NO path", "SO path", "EA path", "WE path")."""

from __future__ import annotations

from .errors import DIR_MSG, DUP_MSG, NOFILE_MSG, CubError
from .model import Scene, TextureKind
from .parse_utils import SPACES, is_file_dir


def get_texture_path(line: str) -> str | None:
    """Path text from ``line`` with outer whitespace removed, or None if empty.

    Spaces inside the path are kept; the path ends at the first newline.
    """
    text = line.lstrip(SPACES)
    if not text:
        return None
    return text.split("\n", 1)[0].rstrip(SPACES)


def parse_texture(scene: Scene, line: str, kind: TextureKind) -> str:
    """Store the texture path from ``line`` (identifier first) on ``scene``.

    The file must exist, be readable and not be a directory. Returns the path.
    """
    if not scene.is_first_occurrence(kind):
        raise CubError("Texture", DUP_MSG)
    path = get_texture_path(line[2:])
    if not path:
        raise CubError("Texture", NOFILE_MSG)
    if is_file_dir(path):
        raise CubError("Texture", DIR_MSG)
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise CubError("Texture", exc.strerror) from exc
    scene.set_texture_path(kind, path)
    return path
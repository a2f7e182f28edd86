"""Enumerate animation clips from a folder."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from clipgraph.core.animation.models import Animation
from clipgraph.core.utils.logging import get_logger

logger = get_logger(__name__)


def _walk_files(folder: Path) -> Iterator[Path]:
    """Yield files under `folder` depth-first, entries in lexical order.

    Symlinks are yielded as entries and never descended into.
    """
    for entry in sorted(folder.iterdir(), key=lambda p: p.name):
        if entry.is_dir() and not entry.is_symlink():
            yield from _walk_files(entry)
        else:
            yield entry


def read_from_folder(folder: str | Path) -> list[Animation]:
    """Create an Animation for every file under `folder`.

    The clip name is the file name without its final extension
    (`A_intro_01.fbx` -> `A_intro_01`). Subfolders are walked recursively.

    Args:
        folder: Directory holding animation files

    Returns:
        Fresh Animation records, in walk order

    Raises:
        FileNotFoundError: If the folder does not exist
        NotADirectoryError: If the path is not a directory
    """
    root = Path(folder)
    if not root.exists():
        raise FileNotFoundError(f"Animations folder does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Animations path is not a directory: {root}")

    animations = [Animation(name=path.stem) for path in _walk_files(root)]
    logger.debug(f"Read {len(animations)} clip(s) from {root}")
    return animations

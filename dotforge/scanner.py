"""Recursive discovery of files below a directory."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

__all__ = ["scan_directory"]


def _walk(directory: Path) -> Iterator[Path]:
    for entry in directory.iterdir():
        if entry.is_file():
            yield entry
        elif entry.is_dir():
            yield from _walk(entry)


def scan_directory(directory: str | os.PathLike[str]) -> list[Path]:
    """Return every file found below *directory*, descending into subdirectories.

    Raises NotADirectoryError if *directory* is not a directory.
    """
    root = Path(directory)
    if not root.is_dir():
        raise NotADirectoryError("Path is not a directory")
    return list(_walk(root))
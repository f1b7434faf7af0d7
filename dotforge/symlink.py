"""Thin helpers around filesystem symbolic links."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["create_symlink", "is_symlink", "get_symlink_target"]


def create_symlink(source: str | os.PathLike[str], target: str | os.PathLike[str]) -> None:
    """Create a symbolic link at *target* pointing to *source*."""
    os.symlink(source, target, target_is_directory=Path(source).is_dir())


def is_symlink(path: str | os.PathLike[str]) -> bool:
    """Return whether *path* is itself a symbolic link."""
    return Path(path).is_symlink()


def get_symlink_target(path: str | os.PathLike[str]) -> Path:
    """Return the path a symbolic link points to.

    Raises ValueError if *path* is not a symbolic link.
    """
    link = Path(path)
    if not link.is_symlink():
        raise ValueError("Path is not a symlink")
    return Path(os.readlink(link))
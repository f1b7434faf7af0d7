"""Dotfile records and link, unlink and backup operations."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from dotforge.symlink import create_symlink

__all__ = ["DotFile", "backup_file", "link_file", "unlink_file", "list_dotfiles"]

_BACKUP_SUFFIX = ".bak"


@dataclass
class DotFile:
    """A managed file: where it lives, where it is linked, and its profile."""

    source: Path
    target: Path
    profile: str | None = None


_registry: list[DotFile] = []


def _register(dotfile: DotFile) -> None:
    """Record *dotfile* so that it is reported by list_dotfiles."""
    _registry.append(dotfile)


def _backup_path(path: Path) -> Path:
    return path.with_suffix(_BACKUP_SUFFIX)


def backup_file(path: str | os.PathLike[str]) -> None:
    """Copy *path* beside itself with its extension replaced by ``.bak``.

    Does nothing if *path* does not exist.
    """
    original = Path(path)
    if not original.exists():
        return
    shutil.copy(original, _backup_path(original))


def link_file(source: str | os.PathLike[str], target: str | os.PathLike[str]) -> None:
    """Link *target* to *source*, replacing an old link or backing up a file."""
    target_path = Path(target)
    if target_path.exists():
        if not target_path.is_symlink():
            backup_file(target_path)
        target_path.unlink()

    target_path.parent.mkdir(parents=True, exist_ok=True)
    create_symlink(source, target_path)


def unlink_file(target: str | os.PathLike[str]) -> None:
    """Remove the link at *target* and restore its backup if one exists.

    Does nothing if *target* does not exist; raises ValueError if it is
    not a symbolic link.
    """
    target_path = Path(target)
    if not target_path.exists():
        return
    if not target_path.is_symlink():
        raise ValueError("Target is not a symlink")

    target_path.unlink()

    backup = _backup_path(target_path)
    if backup.exists():
        backup.rename(target_path)


def list_dotfiles(profile: str | None = None) -> list[DotFile]:
    """Return the registered dotfiles, only those of *profile* if one is given.

    Nothing is registered by the public operations, so the result is empty
    unless entries have been recorded.
    """
    if profile is None:
        return list(_registry)
    return [dotfile for dotfile in _registry if dotfile.profile == profile]
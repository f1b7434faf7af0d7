"""Path helpers: tilde expansion and normalisation."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["expand_tilde", "is_absolute", "normalize", "get_version"]

_VERSION = "0.2.0"


def get_version() -> str:
    """Return the version string of the tool."""
    return _VERSION


def expand_tilde(path: str | os.PathLike[str]) -> Path:
    """Replace a leading ``~`` component with the user's home directory.

    Only a first component that is exactly ``~`` is expanded; ``~user``
    forms are left alone. If the home directory cannot be determined the
    path is returned unchanged.
    """
    text = os.fspath(path)
    original = Path(text)
    if not original.parts or original.parts[0] != "~":
        return original

    rest = text[1:]
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return original

    if rest.startswith(("/", "\\")):
        return home / rest[1:]
    if rest:
        return home / rest
    return home


def is_absolute(path: str | os.PathLike[str]) -> bool:
    """Return whether *path* is absolute."""
    return Path(path).is_absolute()


def normalize(path: str | os.PathLike[str]) -> Path:
    """Expand a leading tilde and make the path absolute against the cwd."""
    expanded = expand_tilde(path)
    if not expanded.is_absolute():
        try:
            return Path.cwd() / expanded
        except OSError:
            return expanded
    return expanded
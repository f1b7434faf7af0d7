"""Location of and connection to the configuration database."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_path

__all__ = ["Config", "default_db_path"]


def default_db_path() -> Path:
    """Return the default database location in the user's config directory."""
    return user_config_path() / "dotforge" / "dotforge.db"


@dataclass
class Config:
    """Configuration store backed by an SQLite database."""

    db_path: Path = field(default_factory=default_db_path)
    connection: sqlite3.Connection | None = field(default=None, repr=False)

    def connect(self) -> None:
        """Open the database at ``db_path``; raises sqlite3 errors on failure."""
        self.connection = sqlite3.connect(self.db_path)
import sqlite3

import pytest

from dotforge.config import Config, default_db_path


def test_default_db_path_layout():
    path = default_db_path()
    assert path.name == "dotforge.db"
    assert path.parent.name == "dotforge"


def test_new_config_uses_default_path_and_is_unconnected():
    config = Config()
    assert config.db_path == default_db_path()
    assert config.connection is None


def test_connect_opens_database(tmp_path):
    db = tmp_path / "dotforge.db"
    config = Config(db_path=db)
    config.connect()
    try:
        assert config.connection is not None
        config.connection.execute("CREATE TABLE t (x INTEGER)")
        config.connection.execute("INSERT INTO t VALUES (7)")
        rows = config.connection.execute("SELECT x FROM t").fetchall()
        assert rows == [(7,)]
    finally:
        config.connection.close()
    assert db.exists()


def test_connect_fails_without_parent_directory(tmp_path):
    config = Config(db_path=tmp_path / "missing" / "dotforge.db")
    with pytest.raises(sqlite3.OperationalError):
        config.connect()
    assert config.connection is None
"""Tests for the Database connection layer."""

from __future__ import annotations

from pathlib import Path

import pytest

from fortune2.db.connection import Database
from fortune2.errors import StoreError


def test_connect_creates_file(tmp_path):
    db_path = tmp_path / "fortune2.db"
    conn = Database(db_path).connect()
    conn.close()
    assert db_path.exists()


def test_connect_creates_parent_dirs(tmp_path):
    db_path = tmp_path / "share" / "fortune2" / "fortune2.db"
    conn = Database(db_path).connect()
    conn.close()
    assert db_path.exists()


def test_wal_journal_mode(tmp_path):
    conn = Database(tmp_path / "fortune2.db").connect()
    mode = conn.execute("PRAGMA journal_mode").fetchone()[0]
    conn.close()
    assert mode == "wal"


def test_row_factory_set(tmp_path):
    conn = Database(tmp_path / "fortune2.db").connect()
    conn.execute("CREATE TABLE t (x INTEGER)")
    conn.execute("INSERT INTO t VALUES (42)")
    row = conn.execute("SELECT x FROM t").fetchone()
    conn.close()
    assert row["x"] == 42


def test_unopenable_path_raises_store_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("plain file")
    with pytest.raises(StoreError):
        Database(blocker / "fortune2.db").connect()


def test_context_manager_closes_connection(tmp_path):
    db = Database(tmp_path / "fortune2.db")
    with db as conn:
        conn.execute("CREATE TABLE t (x INTEGER)")
    with pytest.raises(Exception):
        conn.execute("SELECT 1")


def test_context_manager_accepts_path_str(tmp_path):
    db = Database(str(tmp_path / "fortune2.db"))
    assert isinstance(db.db_path, Path)
    with db as conn:
        assert conn.execute("SELECT 1").fetchone()[0] == 1

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from fortune2.db.connection import Database
from fortune2.db.repository import JarRepository


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's config files and FORTUNE2* env vars out of every test."""
    monkeypatch.delenv("FORTUNE2FILE", raising=False)
    monkeypatch.delenv("FORTUNE2_LOG_LEVEL", raising=False)
    monkeypatch.setattr("fortune2.config._GLOBAL_CONFIG_PATH", tmp_path / "no-global" / "config.yaml")
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def tmp_db(tmp_path):
    """File-based DB in tmp_path, closed after test."""
    db = Database(tmp_path / "fortune2.db")
    conn = db.connect()
    yield conn
    conn.close()


@pytest.fixture
def repo(tmp_db):
    return JarRepository(tmp_db)


@pytest.fixture
def write_jar_file(tmp_path):
    """Write a '%'-separated fortune file and return its path."""

    def _write(name: str, records: list[str]) -> Path:
        path = tmp_path / "src" / name
        path.parent.mkdir(exist_ok=True)
        path.write_text("".join(f"{r}\n%\n" for r in records), encoding="utf-8")
        return path

    return _write

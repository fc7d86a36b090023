"""Tests for fortune2 random and the default command."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from fortune2.cli.main import app
from fortune2.db.connection import Database
from fortune2.db.repository import JarRepository

runner = CliRunner()


def _make_db(path: Path, jars: dict[str, list[str]]) -> Path:
    with Database(path) as conn:
        repo = JarRepository(conn)
        for jar, bodies in jars.items():
            repo.replace_jar(jar, bodies)
    return path


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return _make_db(tmp_path / "fortune2.db", {"test": ["Hello\n", "World\n"]})


def test_random_prints_a_fortune(db_path):
    result = runner.invoke(app, ["-F", str(db_path), "random"])
    assert result.exit_code == 0, result.output
    assert result.output in {"Hello\n", "World\n"}


def test_random_uniform_named_jar(db_path):
    result = runner.invoke(app, ["-F", str(db_path), "random", "test", "-e"])
    assert result.exit_code == 0, result.output
    assert result.output in {"Hello\n", "World\n"}


def test_random_show_jar(db_path):
    result = runner.invoke(app, ["-F", str(db_path), "random", "-c"])
    assert result.output.startswith("(test)\n")


def test_random_combined_short_flags(db_path):
    result = runner.invoke(app, ["-F", str(db_path), "random", "-ec", "test"])
    assert result.exit_code == 0, result.output
    assert result.output in {"(test)\nHello\n", "(test)\nWorld\n"}


def test_random_list_jars(db_path):
    result = runner.invoke(app, ["-F", str(db_path), "random", "-f"])
    assert result.exit_code == 0
    assert "test" in result.output
    assert "100.00" in result.output


def test_random_only_from_named_jars(tmp_path):
    db_path = _make_db(tmp_path / "f.db", {"art": ["art\n"], "zen": ["zen\n"] * 50})
    outputs = {runner.invoke(app, ["-F", str(db_path), "random", "art"]).output for _ in range(10)}
    assert outputs == {"art\n"}


def test_random_missing_named_jars_fall_back(db_path):
    result = runner.invoke(app, ["-F", str(db_path), "random", "nope"])
    assert result.exit_code == 0
    assert result.output in {"Hello\n", "World\n"}


def test_random_uniform_missing_jar_exits_1(db_path):
    result = runner.invoke(app, ["-F", str(db_path), "random", "-e", "nope"])
    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_random_empty_jar_exits_1(tmp_path):
    db_path = _make_db(tmp_path / "f.db", {"empty": []})
    result = runner.invoke(app, ["-F", str(db_path), "random", "-e", "empty"])
    assert result.exit_code == 1
    assert "no fortunes" in result.output


def test_random_no_jars_exits_1(tmp_path):
    result = runner.invoke(app, ["-F", str(tmp_path / "empty.db"), "random"])
    assert result.exit_code == 1
    assert "No fortune jars yet" in result.output


def test_no_subcommand_prints_random_fortune(db_path):
    result = runner.invoke(app, ["-F", str(db_path)])
    assert result.exit_code == 0, result.output
    assert result.output in {"Hello\n", "World\n"}


def test_no_subcommand_no_jars_exits_1(tmp_path):
    result = runner.invoke(app, ["-F", str(tmp_path / "empty.db")])
    assert result.exit_code == 1


def test_uniform_mode_from_config(db_path, tmp_path):
    (tmp_path / "fortune2.yaml").write_text("selection:\n  mode: uniform\n", encoding="utf-8")
    result = runner.invoke(app, ["-F", str(db_path), "random"])
    assert result.exit_code == 0
    assert result.output in {"Hello\n", "World\n"}


def test_bad_config_exits_1(db_path, tmp_path):
    (tmp_path / "fortune2.yaml").write_text("selection:\n  mode: sometimes\n", encoding="utf-8")
    result = runner.invoke(app, ["-F", str(db_path), "random"])
    assert result.exit_code == 1
    assert "selection.mode" in result.output

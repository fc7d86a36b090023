"""Tests for JarRepository."""

from __future__ import annotations

import sqlite3

import pytest

from fortune2.db.models import Fortune
from fortune2.db.repository import JarRepository, quote_jar
from fortune2.errors import JarNotFoundError, StoreError


# ------------------------------------------------------------------
# Jars
# ------------------------------------------------------------------

def test_list_jars_empty(repo):
    assert repo.list_jars() == []


def test_list_jars_sorted(repo):
    repo.replace_jar("zen", ["a\n"])
    repo.replace_jar("art", ["b\n"])
    assert repo.list_jars() == ["art", "zen"]


def test_jar_exists(repo):
    repo.replace_jar("zen", ["a\n"])
    assert repo.jar_exists("zen")
    assert not repo.jar_exists("art")


def test_replace_jar_returns_count(repo):
    assert repo.replace_jar("zen", ["a\n", "b\n", "c\n"]) == 3
    assert repo.count_fortunes("zen") == 3


def test_replace_jar_replaces_not_appends(repo):
    repo.replace_jar("zen", ["a\n", "b\n"])
    repo.replace_jar("zen", ["c\n", "d\n"])
    assert repo.count_fortunes("zen") == 2
    assert [f.body for f in repo.iter_fortunes("zen")] == ["c\n", "d\n"]


def test_replace_jar_ids_start_at_one(repo):
    repo.replace_jar("zen", ["a\n", "b\n"])
    assert [f.id for f in repo.iter_fortunes("zen")] == [1, 2]


def test_replace_jar_with_no_records_creates_empty_jar(repo):
    assert repo.replace_jar("empty", []) == 0
    assert repo.jar_exists("empty")
    assert repo.count_fortunes("empty") == 0


def test_replace_jar_failure_keeps_previous_jar(repo):
    repo.replace_jar("zen", ["a\n", "b\n"])

    def _bodies():
        yield "c\n"
        raise sqlite3.OperationalError("disk I/O error")

    with pytest.raises(StoreError):
        repo.replace_jar("zen", _bodies())

    assert [f.body for f in repo.iter_fortunes("zen")] == ["a\n", "b\n"]


def test_replace_jar_failure_leaves_no_new_jar(repo):
    def _bodies():
        raise sqlite3.OperationalError("boom")
        yield  # pragma: no cover

    with pytest.raises(StoreError):
        repo.replace_jar("fresh", _bodies())
    assert not repo.jar_exists("fresh")


def test_delete_jar(repo):
    repo.replace_jar("zen", ["a\n"])
    assert repo.delete_jar("zen") is True
    assert repo.list_jars() == []


def test_delete_missing_jar_returns_false(repo):
    assert repo.delete_jar("nope") is False


def test_jar_names_are_quoted(repo):
    name = 'odd "name"; DROP TABLE x'
    repo.replace_jar(name, ["a\n"])
    assert repo.list_jars() == [name]
    assert repo.get_fortune(name, 1).body == "a\n"


def test_quote_jar_doubles_quotes():
    assert quote_jar('a"b') == '"a""b"'


# ------------------------------------------------------------------
# Counts and fortunes
# ------------------------------------------------------------------

def test_count_fortunes_missing_jar_is_zero(repo):
    assert repo.count_fortunes("missing") == 0


def test_get_fortune(repo):
    repo.replace_jar("zen", ["a\n", "b\n", "c\n"])
    assert repo.get_fortune("zen", 3) == Fortune(jar="zen", id=3, body="c\n")


def test_get_fortune_reports_stored_jar_name(repo):
    repo.replace_jar("zen", ["a\n"])
    assert repo.get_fortune("ZEN", 1) == Fortune(jar="zen", id=1, body="a\n")


def test_iter_fortunes_reports_stored_jar_name(repo):
    repo.replace_jar("zen", ["a\n", "b\n"])
    assert {f.jar for f in repo.iter_fortunes("Zen")} == {"zen"}


def test_get_fortune_missing_id(repo):
    repo.replace_jar("zen", ["a\n"])
    assert repo.get_fortune("zen", 9) is None


def test_get_fortune_missing_jar_raises(repo):
    with pytest.raises(JarNotFoundError):
        repo.get_fortune("missing", 1)


def test_iter_fortunes_missing_jar_raises(repo):
    with pytest.raises(JarNotFoundError):
        list(repo.iter_fortunes("missing"))


def test_query_errors_wrapped(tmp_db):
    repo = JarRepository(tmp_db)
    tmp_db.close()
    with pytest.raises(StoreError):
        repo.list_jars()

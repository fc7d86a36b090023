"""Tests for per-jar statistics."""

from __future__ import annotations

import pytest

from fortune2.db.models import JarInfo
from fortune2.stats import jars_info


def test_single_jar_is_whole_total(repo):
    repo.replace_jar("test", ["Hello\n", "World\n"])
    assert jars_info(repo) == [JarInfo(jar="test", num_fortunes=2, pct_total=100.0)]


def test_shares_across_all_jars(repo):
    repo.replace_jar("A", ["a\n"])
    repo.replace_jar("B", ["b\n"] * 3)
    infos = {i.jar: i for i in jars_info(repo)}
    assert infos["A"].pct_total == pytest.approx(25.0)
    assert infos["B"].pct_total == pytest.approx(75.0)


def test_named_jars_only(repo):
    repo.replace_jar("A", ["a\n"])
    repo.replace_jar("B", ["b\n"] * 3)
    infos = jars_info(repo, ["B"])
    assert [(i.jar, i.num_fortunes, i.pct_total) for i in infos] == [("B", 3, 100.0)]


def test_missing_jar_counts_zero(repo):
    repo.replace_jar("A", ["a\n"])
    infos = jars_info(repo, ["A", "missing"])
    assert infos[1] == JarInfo(jar="missing", num_fortunes=0, pct_total=0.0)


def test_no_jars(repo):
    assert jars_info(repo) == []


def test_deleted_jar_disappears(repo):
    repo.replace_jar("A", ["a\n"])
    repo.replace_jar("B", ["b\n"])
    repo.delete_jar("A")
    assert [i.jar for i in jars_info(repo)] == ["B"]

"""Repository for all fortune2 database operations.

Each jar is one table ``(id INTEGER PRIMARY KEY NOT NULL, body TEXT)`` named
after the jar. Jars are created, replaced and dropped as whole units; there is
no row-level delete, so ``max(rowid)`` equals the number of fortunes in a jar.
``count_fortunes`` relies on that and must switch to ``COUNT(*)`` if
row-level deletes are ever added.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterable, Iterator

from fortune2.db.models import Fortune
from fortune2.errors import JarNotFoundError, StoreError

log = logging.getLogger(__name__)


def quote_jar(jar: str) -> str:
    """Quote *jar* as an SQLite identifier."""
    return '"' + jar.replace('"', '""') + '"'


class JarRepository:
    """Data access layer for jars and their fortunes.

    Wraps an open sqlite3.Connection. The connection is owned by the caller
    and must be closed after use. Every ``sqlite3.Error`` is re-raised as
    ``StoreError``.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    # ------------------------------------------------------------------
    # Jars
    # ------------------------------------------------------------------

    def list_jars(self) -> list[str]:
        """Return the names of all jars, sorted."""
        rows = self._query(
            "SELECT DISTINCT name FROM sqlite_master "
            "WHERE type = 'table' AND name NOT LIKE 'sqlite\\_%' ESCAPE '\\' "
            "ORDER BY name"
        )
        return [r["name"] for r in rows]

    def jar_exists(self, jar: str) -> bool:
        """Return True if a table named *jar* exists (SQLite names ignore case)."""
        rows = self._query(
            "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ? COLLATE NOCASE",
            (jar,),
        )
        return bool(rows)

    def count_fortunes(self, jar: str) -> int:
        """Return the number of fortunes in *jar*, or 0 if it is missing or empty."""
        if not self.jar_exists(jar):
            return 0
        rows = self._query(f"SELECT max(rowid) AS n FROM {quote_jar(jar)}")  # noqa: S608
        return rows[0]["n"] or 0

    def replace_jar(self, jar: str, bodies: Iterable[str]) -> int:
        """Drop *jar* if present, recreate it and insert *bodies* in one transaction.

        Either the whole replacement becomes visible or, on any failure, the
        previous jar is left untouched.

        Args:
            jar: Jar (table) name.
            bodies: Fortune bodies in file order; ids are assigned from 1.

        Returns:
            Number of fortunes inserted.

        Raises:
            StoreError: on any database failure (the transaction is rolled back).
        """
        table = quote_jar(jar)
        count = 0
        try:
            self._conn.execute("BEGIN")
            self._conn.execute(f"DROP TABLE IF EXISTS {table}")
            self._conn.execute(
                f"CREATE TABLE {table} (id INTEGER PRIMARY KEY NOT NULL, body TEXT)"
            )
            for body in bodies:
                self._conn.execute(f"INSERT INTO {table} (body) VALUES (?)", (body,))  # noqa: S608
                count += 1
            self._conn.commit()
        except sqlite3.Error as exc:
            self._conn.rollback()
            raise StoreError(f"Failed to write jar '{jar}': {exc}") from exc
        log.debug("replaced jar %s with %d fortunes", jar, count)
        return count

    def delete_jar(self, jar: str) -> bool:
        """Drop *jar*. Returns False if it did not exist."""
        if not self.jar_exists(jar):
            return False
        try:
            self._conn.execute("BEGIN")
            self._conn.execute(f"DROP TABLE IF EXISTS {quote_jar(jar)}")
            self._conn.commit()
        except sqlite3.Error as exc:
            self._conn.rollback()
            raise StoreError(f"Failed to delete jar '{jar}': {exc}") from exc
        log.debug("dropped jar %s", jar)
        return True

    # ------------------------------------------------------------------
    # Fortunes
    # ------------------------------------------------------------------

    def get_fortune(self, jar: str, fortune_id: int) -> Fortune | None:
        """Return fortune *fortune_id* of *jar*, or None if there is no such row.

        Raises:
            JarNotFoundError: if *jar* does not exist.
        """
        name = self._require(jar)
        rows = self._query(
            f"SELECT id, body FROM {quote_jar(name)} WHERE id = ?",  # noqa: S608
            (fortune_id,),
        )
        return _row_to_fortune(name, rows[0]) if rows else None

    def iter_fortunes(self, jar: str) -> Iterator[Fortune]:
        """Yield every fortune of *jar* in storage order.

        Raises:
            JarNotFoundError: if *jar* does not exist.
        """
        name = self._require(jar)
        for row in self._query(f"SELECT id, body FROM {quote_jar(name)}"):  # noqa: S608
            yield _row_to_fortune(name, row)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require(self, jar: str) -> str:
        """Return the stored spelling of *jar*, which may differ in case."""
        rows = self._query(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ? COLLATE NOCASE",
            (jar,),
        )
        if not rows:
            raise JarNotFoundError(jar)
        return rows[0]["name"]

    def _query(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"Database query failed: {exc}") from exc


def _row_to_fortune(jar: str, row: sqlite3.Row) -> Fortune:
    return Fortune(jar=jar, id=row["id"], body=row["body"] or "")

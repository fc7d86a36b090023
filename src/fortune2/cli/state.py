"""Shared CLI state: resolved configuration and database access."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console

from fortune2.cli.errors import (
    err_empty_jar,
    err_fortune_not_found,
    err_ingest,
    err_invalid_pattern,
    err_jar_not_found,
    err_no_jars,
    err_store,
)
from fortune2.config import Fortune2Config
from fortune2.db.connection import Database
from fortune2.db.repository import JarRepository
from fortune2.errors import (
    EmptyJarError,
    Fortune2Error,
    FortuneNotFoundError,
    IngestError,
    InvalidPatternError,
    JarNotFoundError,
    NoJarsError,
    StoreError,
)

console = Console()


@dataclass
class CliState:
    config: Fortune2Config
    db_path: Path


def get_state(ctx: typer.Context) -> CliState:
    """Return the state stored by the root callback."""
    return ctx.find_object(CliState)


@contextmanager
def open_repo(state: CliState) -> Iterator[JarRepository]:
    """Open the fortune database for the duration of a command.

    Any ``Fortune2Error`` raised inside the block is reported and turned into
    exit code 1.
    """
    try:
        conn = Database(state.db_path).connect()
    except StoreError as exc:
        console.print(err_store(str(exc), str(state.db_path)))
        raise typer.Exit(1) from exc

    try:
        yield JarRepository(conn)
    except Fortune2Error as exc:
        console.print(_describe(exc, state, conn))
        raise typer.Exit(1) from exc
    finally:
        conn.close()


def _describe(exc: Fortune2Error, state: CliState, conn) -> str:
    if isinstance(exc, NoJarsError):
        return err_no_jars()
    if isinstance(exc, JarNotFoundError):
        try:
            known = JarRepository(conn).list_jars()
        except StoreError:
            known = []
        return err_jar_not_found(exc.jar, known)
    if isinstance(exc, EmptyJarError):
        return err_empty_jar(exc.jar)
    if isinstance(exc, FortuneNotFoundError):
        return err_fortune_not_found(exc.jar, exc.fortune_id)
    if isinstance(exc, InvalidPatternError):
        return err_invalid_pattern(exc.pattern, exc.reason)
    if isinstance(exc, IngestError):
        return err_ingest(str(exc))
    return err_store(str(exc), str(state.db_path))

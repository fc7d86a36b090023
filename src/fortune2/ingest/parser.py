"""Fortune file parser.

A fortune file is plain text in which records are separated by a line whose
only content (ignoring surrounding whitespace) is ``%``::

    The only winning move is not to play.
    %
    Do or do not.
    There is no try.
    %

Each record keeps its lines, each terminated by ``\\n``. Whitespace-only
records are dropped. Text after the last delimiter becomes a final record.

Usage:
    jar_file = parse_file(Path("fortunes.txt"))
    print(jar_file.jar, len(jar_file.records))
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from fortune2.errors import IngestError

DELIMITER = "%"


@dataclass
class JarFile:
    jar: str             # base name up to the first "."
    path: Path
    records: list[str] = field(default_factory=list)


def jar_name_for(path: Path | str) -> str:
    """Return the jar name for a source file: its base name up to the first dot.

    ``/data/fortunes.txt`` → ``fortunes``; ``art.v2.txt`` → ``art``.

    Raises:
        IngestError: if the base name yields an empty jar name (e.g. ``.hidden``).
    """
    name = Path(path).name.split(".", 1)[0]
    if not name:
        raise IngestError(f"Cannot derive a jar name from '{path}'.")
    return name


def split_records(lines: Iterable[str]) -> list[str]:
    """Split *lines* into fortune records on ``%`` delimiter lines.

    Line terminators on the input are ignored; every kept line is re-terminated
    with ``\\n``. Records that are empty or whitespace-only are skipped.
    """
    records: list[str] = []
    current: list[str] = []

    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.strip() == DELIMITER:
            _flush(current, records)
            current = []
            continue
        current.append(line + "\n")

    _flush(current, records)
    return records


def _flush(current: list[str], records: list[str]) -> None:
    body = "".join(current)
    if body.strip():
        records.append(body)


def parse_file(path: Path | str) -> JarFile:
    """Read and split a fortune file.

    Undecodable bytes are replaced rather than rejected.

    Raises:
        IngestError: if the file cannot be read or has no usable jar name.
    """
    path = Path(path)
    jar = jar_name_for(path)
    try:
        with path.open(encoding="utf-8", errors="replace", newline="") as fh:
            records = split_records(fh)
    except OSError as exc:
        raise IngestError(f"Cannot read '{path}': {exc.strerror or exc}") from exc
    return JarFile(jar=jar, path=path, records=records)

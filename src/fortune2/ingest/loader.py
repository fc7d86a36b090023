"""Load fortune files into the store, one jar per file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from fortune2.db.repository import JarRepository
from fortune2.ingest.parser import parse_file

log = logging.getLogger(__name__)


@dataclass
class IngestResult:
    jar: str
    path: Path
    count: int


def ingest_file(repo: JarRepository, path: Path | str) -> IngestResult:
    """Parse *path* and replace the jar named after it.

    The replacement is atomic: if writing fails, the previous contents of the
    jar (if any) are kept.

    Raises:
        IngestError: if the file cannot be read.
        StoreError: if the jar cannot be written.
    """
    jar_file = parse_file(path)
    log.debug("parsed %s: %d records for jar %s", jar_file.path, len(jar_file.records), jar_file.jar)
    count = repo.replace_jar(jar_file.jar, jar_file.records)
    return IngestResult(jar=jar_file.jar, path=jar_file.path, count=count)

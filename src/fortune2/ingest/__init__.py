"""fortune2 ingest pipeline — fortune file parser and jar loader."""

from fortune2.ingest.loader import IngestResult, ingest_file
from fortune2.ingest.parser import DELIMITER, JarFile, jar_name_for, parse_file, split_records

__all__ = [
    "DELIMITER",
    "IngestResult",
    "JarFile",
    "ingest_file",
    "jar_name_for",
    "parse_file",
    "split_records",
]

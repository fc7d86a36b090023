"""fortune2 database layer."""

from fortune2.db.connection import Database
from fortune2.db.models import Fortune, JarInfo
from fortune2.db.repository import JarRepository, quote_jar

__all__ = [
    "Database",
    "Fortune",
    "JarInfo",
    "JarRepository",
    "quote_jar",
]

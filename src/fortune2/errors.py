"""Exception hierarchy for fortune2.

Library code raises these; only the CLI and HTTP entry points decide how an
error maps to an exit code or status code.
"""

from __future__ import annotations


class Fortune2Error(Exception):
    """Base class for all fortune2 errors."""


class StoreError(Fortune2Error):
    """The fortune database could not be opened, read or written."""


class IngestError(Fortune2Error):
    """A source file could not be read or mapped to a jar name."""


class NoJarsError(Fortune2Error):
    """The database holds no jars at all."""

    def __init__(self) -> None:
        super().__init__("No fortune jars in the database.")


class JarNotFoundError(Fortune2Error):
    """A named jar does not exist."""

    def __init__(self, jar: str) -> None:
        super().__init__(f"Jar '{jar}' does not exist.")
        self.jar = jar


class EmptyJarError(Fortune2Error):
    """A jar exists but holds no fortunes."""

    def __init__(self, jar: str) -> None:
        super().__init__(f"Jar '{jar}' is empty.")
        self.jar = jar


class FortuneNotFoundError(Fortune2Error):
    """No fortune with the requested id exists in the jar."""

    def __init__(self, jar: str, fortune_id: int) -> None:
        super().__init__(f"Jar '{jar}' has no fortune #{fortune_id}.")
        self.jar = jar
        self.fortune_id = fortune_id


class InvalidPatternError(Fortune2Error):
    """A search pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid search pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason

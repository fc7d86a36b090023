"""Domain models for the fortune2 store."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Fortune:
    jar: str
    id: int
    body: str

    def to_dict(self) -> dict:
        return {"jar": self.jar, "id": self.id, "body": self.body}


@dataclass
class JarInfo:
    jar: str
    num_fortunes: int
    pct_total: float = 0.0

    def to_dict(self) -> dict:
        return {"jar": self.jar, "numfortunes": self.num_fortunes, "pcttotal": self.pct_total}

"""Per-jar fortune counts."""

from __future__ import annotations

from collections.abc import Sequence

from fortune2.db.models import JarInfo
from fortune2.db.repository import JarRepository


def jars_info(repo: JarRepository, jars: Sequence[str] | None = None) -> list[JarInfo]:
    """Return count and share of the total for each of *jars* (all jars when empty).

    Jars that do not exist are listed with zero fortunes.
    """
    names = list(jars) if jars else repo.list_jars()
    counts = [repo.count_fortunes(jar) for jar in names]
    total = sum(counts)

    return [
        JarInfo(
            jar=jar,
            num_fortunes=count,
            pct_total=(count / total * 100) if total > 0 else 0.0,
        )
        for jar, count in zip(names, counts)
    ]

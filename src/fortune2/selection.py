"""Random fortune selection.

Selection happens in two steps: pick a jar, then pick a fortune from it.

Jar choice (``SelectionMode``):
  WEIGHTED  each candidate's chance is proportional to its fortune count
            (the default, so every fortune across the candidates is equally
            likely)
  UNIFORM   each candidate jar is equally likely regardless of size

If the weighted total over the candidates is zero (named jars missing or
empty), the choice falls back to UNIFORM over every jar in the store.

Fortune choice draws an id uniformly from ``[1, count]``; ids are contiguous
because jars are only ever replaced as a whole.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from enum import Enum

from fortune2.db.models import Fortune
from fortune2.db.repository import JarRepository
from fortune2.errors import EmptyJarError, FortuneNotFoundError, JarNotFoundError, NoJarsError

log = logging.getLogger(__name__)


class SelectionMode(str, Enum):
    WEIGHTED = "weighted"
    UNIFORM = "uniform"


class Selector:
    """Picks jars and fortunes from a repository.

    One ``random.Random`` instance is created per selector and reused for
    every draw; it is never reseeded. Pass *rng* to make draws reproducible.
    """

    def __init__(self, repo: JarRepository, rng: random.Random | None = None) -> None:
        self.repo = repo
        self.rng = rng if rng is not None else random.Random()

    def choose_jar(
        self,
        jars: Sequence[str] | None = None,
        mode: SelectionMode = SelectionMode.WEIGHTED,
    ) -> str:
        """Pick one jar name from *jars* (all jars when empty).

        Raises:
            NoJarsError: if there is nothing to pick from.
        """
        candidates = list(jars) if jars else self.repo.list_jars()
        if not candidates:
            raise NoJarsError()

        if mode is SelectionMode.UNIFORM:
            return self.rng.choice(candidates)
        return self._choose_weighted(candidates)

    def _choose_weighted(self, candidates: list[str]) -> str:
        counts = [self.repo.count_fortunes(jar) for jar in candidates]
        total = sum(counts)

        if total == 0:
            log.debug("no fortunes in %s; choosing among all jars", candidates)
            return self.choose_jar(None, SelectionMode.UNIFORM)

        pick = self.rng.randrange(total)
        running = 0
        for jar, count in zip(candidates, counts):
            running += count
            if pick < running:
                return jar
        # unreachable: pick < total == running after the loop
        raise AssertionError(f"weighted pick {pick} outside total {total}")

    def draw(self, jar: str) -> Fortune:
        """Return a uniformly random fortune from *jar*.

        Raises:
            JarNotFoundError: if *jar* does not exist.
            EmptyJarError: if *jar* has no fortunes.
        """
        if not self.repo.jar_exists(jar):
            raise JarNotFoundError(jar)
        count = self.repo.count_fortunes(jar)
        if count == 0:
            raise EmptyJarError(jar)
        return self.lookup(jar, self.rng.randint(1, count))

    def lookup(self, jar: str, fortune_id: int) -> Fortune:
        """Return fortune *fortune_id* from *jar*.

        Raises:
            JarNotFoundError: if *jar* does not exist.
            FortuneNotFoundError: if the jar has no such fortune.
        """
        fortune = self.repo.get_fortune(jar, fortune_id)
        if fortune is None:
            raise FortuneNotFoundError(jar, fortune_id)
        return fortune

    def random_fortune(
        self,
        jars: Sequence[str] | None = None,
        mode: SelectionMode = SelectionMode.WEIGHTED,
    ) -> Fortune:
        """Pick a jar from *jars* with *mode*, then a random fortune from it."""
        jar = self.choose_jar(jars, mode)
        log.debug("selected jar %s (%s)", jar, mode.value)
        return self.draw(jar)

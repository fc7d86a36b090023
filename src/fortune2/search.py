"""Regular-expression search over the fortunes of a jar."""

from __future__ import annotations

import re
from collections.abc import Iterator

from fortune2.db.models import Fortune
from fortune2.db.repository import JarRepository
from fortune2.errors import InvalidPatternError, JarNotFoundError


def compile_pattern(pattern: str, ignore_case: bool = False) -> re.Pattern[str]:
    """Compile *pattern*; an empty pattern matches every fortune.

    Raises:
        InvalidPatternError: if *pattern* is not a valid regular expression.
    """
    flags = re.IGNORECASE if ignore_case else 0
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise InvalidPatternError(pattern, str(exc)) from exc


def search_jar(
    repo: JarRepository,
    jar: str,
    pattern: str,
    ignore_case: bool = False,
) -> Iterator[Fortune]:
    """Yield every fortune in *jar* whose body matches *pattern*, in storage order.

    The pattern is compiled and the jar checked before the first result, so
    errors surface even if the caller never iterates.

    Raises:
        InvalidPatternError: if *pattern* does not compile.
        JarNotFoundError: if *jar* does not exist.
    """
    regex = compile_pattern(pattern, ignore_case)
    if not repo.jar_exists(jar):
        raise JarNotFoundError(jar)
    return (f for f in repo.iter_fortunes(jar) if regex.search(f.body))

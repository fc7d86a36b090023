"""Output formats for fortunes and jar statistics.

Formats (``OutputFormat``):
  plain     optional "(jar)" line, then the fortune text
  htmlpre   <article><pre> block, text kept verbatim (escaped)
  html      <article class="fortune"><p> block, one <br> per line
  json      {"jar", "id", "body"}

All functions are pure and return strings.
"""

from __future__ import annotations

import html
import json
from collections.abc import Sequence
from enum import Enum

from fortune2.db.models import Fortune, JarInfo
from fortune2.ingest.parser import DELIMITER


class OutputFormat(str, Enum):
    PLAIN = "plain"
    HTMLPRE = "htmlpre"
    HTML = "html"
    JSON = "json"

    @classmethod
    def parse(cls, value: str | None) -> OutputFormat:
        """Map a query-string value to a format; unknown or empty means plain."""
        try:
            return cls(value or cls.PLAIN.value)
        except ValueError:
            return cls.PLAIN


_CONTENT_TYPES = {
    OutputFormat.PLAIN: "text/plain; charset=utf-8",
    OutputFormat.HTMLPRE: "text/html; charset=utf-8",
    OutputFormat.HTML: "text/html; charset=utf-8",
    OutputFormat.JSON: "application/json",
}


def content_type(fmt: OutputFormat) -> str:
    return _CONTENT_TYPES[fmt]


def _terminated(text: str) -> str:
    return text if text.endswith("\n") else text + "\n"


def render_plain(fortune: Fortune, show_jar: bool = False) -> str:
    prefix = f"({fortune.jar})\n" if show_jar else ""
    return prefix + _terminated(fortune.body)


def render_htmlpre(fortune: Fortune, show_jar: bool = False) -> str:
    parts = ["<article>\n", "<pre>\n"]
    if show_jar:
        parts.append(f"({html.escape(fortune.jar)})\n")
    parts.append(_terminated(html.escape(fortune.body)))
    parts.append("</pre>\n</article>\n")
    return "".join(parts)


def render_html(fortune: Fortune, show_jar: bool = False) -> str:
    parts = ['<article class="fortune">\n', "<p>\n"]
    if show_jar:
        parts.append(f"({html.escape(fortune.jar)})<br>\n")
    for line in fortune.body.strip().split("\n"):
        parts.append(f"{html.escape(line)}<br>\n")
    parts.append("</p>\n</article>\n")
    return "".join(parts)


def render_json(fortune: Fortune) -> str:
    return json.dumps(fortune.to_dict(), indent="\t")


def render_fortune(fortune: Fortune, fmt: OutputFormat = OutputFormat.PLAIN, show_jar: bool = False) -> str:
    """Render *fortune* in *fmt*. ``show_jar`` has no effect on JSON."""
    if fmt is OutputFormat.HTMLPRE:
        return render_htmlpre(fortune, show_jar)
    if fmt is OutputFormat.HTML:
        return render_html(fortune, show_jar)
    if fmt is OutputFormat.JSON:
        return render_json(fortune)
    return render_plain(fortune, show_jar)


def render_search_match(fortune: Fortune, show_jar: bool = False) -> str:
    """A search hit: the fortune followed by a delimiter line on its own line."""
    return render_plain(fortune, show_jar) + DELIMITER + "\n"


def render_jar_stats(infos: Sequence[JarInfo]) -> str:
    """Fixed-width text table of jar counts and shares."""
    lines = [
        f"{'Fortune Jar':<20}  {'# fortunes':>10}  {'%':>6}",
        f"{'-' * 20}  {'-' * 10}  {'-' * 6}",
    ]
    for info in infos:
        lines.append(f"{info.jar:<20}  {info.num_fortunes:>10d}  {info.pct_total:>6.2f}")
    return "\n".join(lines) + "\n"


def render_jar_stats_json(infos: Sequence[JarInfo]) -> str:
    return json.dumps([i.to_dict() for i in infos], indent="\t")

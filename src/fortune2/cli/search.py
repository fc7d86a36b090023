"""fortune2 search — print every fortune matching a regular expression.

Matches are printed in fortune-file form: each fortune followed by a ``%``
line, so the output can be ingested again.
"""

from __future__ import annotations

from typing import Annotated

import typer

from fortune2.cli.state import get_state, open_repo
from fortune2.render import render_search_match
from fortune2.search import compile_pattern, search_jar


def search_cmd(
    ctx: typer.Context,
    pattern: Annotated[
        str,
        typer.Argument(help="Python regular expression to look for.", show_default=False),
    ],
    jars: Annotated[
        list[str] | None,
        typer.Argument(help="Jars to search (default: all).", show_default=False),
    ] = None,
    ignore_case: Annotated[
        bool,
        typer.Option("--ignore-case", "-i", help="Match regardless of letter case."),
    ] = False,
    show_jar: Annotated[
        bool,
        typer.Option("--show-jar", "-c", help="Print the jar name before each match."),
    ] = False,
) -> None:
    """Search fortunes with a regular expression."""
    state = get_state(ctx)

    with open_repo(state) as repo:
        compile_pattern(pattern, ignore_case)
        for jar in jars or repo.list_jars():
            for fortune in search_jar(repo, jar, pattern, ignore_case):
                typer.echo(render_search_match(fortune, show_jar=show_jar), nl=False)

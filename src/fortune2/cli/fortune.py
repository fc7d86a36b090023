"""fortune2 random — print one random fortune.

  -e  pick the jar uniformly instead of by size
  -c  print "(jar)" before the fortune
  -f  list the candidate jars and their shares instead of a fortune

Short flags combine, e.g. ``fortune2 random -ec``.
"""

from __future__ import annotations

from typing import Annotated

import typer

from fortune2.cli.errors import err_no_jars
from fortune2.cli.info import print_jar_stats
from fortune2.cli.state import console, get_state, open_repo
from fortune2.render import render_plain
from fortune2.selection import SelectionMode, Selector
from fortune2.stats import jars_info


def random_cmd(
    ctx: typer.Context,
    jars: Annotated[
        list[str] | None,
        typer.Argument(help="Jars to pick from (default: all).", show_default=False),
    ] = None,
    uniform: Annotated[
        bool,
        typer.Option("--uniform", "-e", help="Give every jar the same chance, regardless of size."),
    ] = False,
    show_jar: Annotated[
        bool,
        typer.Option("--show-jar", "-c", help="Print the jar name before the fortune."),
    ] = False,
    list_jars: Annotated[
        bool,
        typer.Option("--list-jars", "-f", help="List candidate jars instead of printing a fortune."),
    ] = False,
) -> None:
    """Print a random fortune."""
    state = get_state(ctx)
    if uniform:
        mode = SelectionMode.UNIFORM
    else:
        mode = state.config.selection.mode

    with open_repo(state) as repo:
        if not repo.list_jars():
            console.print(err_no_jars())
            raise typer.Exit(1)

        if list_jars:
            print_jar_stats(jars_info(repo, jars))
            return

        fortune = Selector(repo).random_fortune(jars, mode)
        typer.echo(render_plain(fortune, show_jar=show_jar), nl=False)

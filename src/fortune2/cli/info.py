"""fortune2 info — fortune counts per jar."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from fortune2.cli.errors import err_no_jars
from fortune2.cli.state import console, get_state, open_repo
from fortune2.db.models import JarInfo
from fortune2.stats import jars_info


def info_cmd(
    ctx: typer.Context,
    jars: Annotated[
        list[str] | None,
        typer.Argument(help="Jars to report on (default: all).", show_default=False),
    ] = None,
) -> None:
    """Show the database location and how many fortunes each jar holds."""
    state = get_state(ctx)

    with open_repo(state) as repo:
        console.print(f"fortune db file:  {escape(str(state.db_path))}\n")
        if not repo.list_jars():
            console.print(err_no_jars())
            raise typer.Exit(1)
        print_jar_stats(jars_info(repo, jars))


def print_jar_stats(infos: Sequence[JarInfo]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Fortune Jar", style="bold")
    table.add_column("# fortunes", justify="right")
    table.add_column("%", justify="right")

    for info in infos:
        table.add_row(escape(info.jar), str(info.num_fortunes), f"{info.pct_total:.2f}")

    console.print(table)

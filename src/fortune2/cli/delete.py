"""fortune2 delete — drop whole jars."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape

from fortune2.cli.errors import warn_jar_not_found
from fortune2.cli.state import console, get_state, open_repo


def delete_cmd(
    ctx: typer.Context,
    jars: Annotated[
        list[str],
        typer.Argument(help="Jar names to delete.", show_default=False),
    ],
) -> None:
    """Delete jars and all their fortunes."""
    state = get_state(ctx)

    with open_repo(state) as repo:
        for jar in jars:
            if repo.delete_jar(jar):
                console.print(f"Deleting jar '{escape(jar)}'... [green]Done[/].")
            else:
                console.print(warn_jar_not_found(jar))

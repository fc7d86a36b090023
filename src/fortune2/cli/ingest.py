"""fortune2 ingest — load fortune files into the database.

Each file becomes one jar named after the file's base name up to the first
dot (``fortunes.txt`` → ``fortunes``). An existing jar of the same name is
replaced, never merged. The first file that fails aborts the command;
jars written before it are kept.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from fortune2.cli.state import console, get_state, open_repo
from fortune2.ingest.loader import ingest_file


def ingest_cmd(
    ctx: typer.Context,
    files: Annotated[
        list[Path],
        typer.Argument(help="Fortune files ('%'-separated records).", show_default=False),
    ],
) -> None:
    """Ingest one or more fortune files, one jar per file."""
    state = get_state(ctx)

    with open_repo(state) as repo:
        for path in files:
            result = ingest_file(repo, path)
            console.print(
                f"Writing '{escape(str(path))}' to jar '[bold]{escape(result.jar)}[/]'... "
                f"[green]Done[/] ({result.count} fortunes)."
            )

"""fortune2 CLI entry point."""

from __future__ import annotations

import importlib.metadata
from pathlib import Path
from typing import Annotated

import typer

from fortune2.cli.delete import delete_cmd
from fortune2.cli.errors import err_config
from fortune2.cli.fortune import random_cmd
from fortune2.cli.info import info_cmd
from fortune2.cli.ingest import ingest_cmd
from fortune2.cli.search import search_cmd
from fortune2.cli.serve import serve_cmd
from fortune2.cli.state import CliState, console
from fortune2.config import ConfigError, load_config
from fortune2.logging_setup import configure_logging


def _installed_version() -> str:
    try:
        return importlib.metadata.version("fortune2")
    except importlib.metadata.PackageNotFoundError:
        return "dev"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"fortune2 {_installed_version()}")
        raise typer.Exit()


app = typer.Typer(
    name="fortune2",
    help=(
        "fortune2 — fortune cookie jars in SQLite.\n\n"
        "  fortune2 ingest FILE...   Load '%'-separated fortune files as jars.\n"
        "  fortune2 random [JAR...]  Print a random fortune (the default command).\n"
        "  fortune2 serve [PORT]     Serve fortunes over HTTP.\n\n"
        "Global options (-F, -v) go before the sub-command: fortune2 -F my.db random news."
    ),
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    db_file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-F",
            help="Fortune database (default: $FORTUNE2FILE, then config, then "
            "/usr/local/share/fortune2/fortune2.db).",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug messages to stderr."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """fortune2 — fortune cookie jars in SQLite."""
    try:
        cfg = load_config()
    except ConfigError as exc:
        console.print(err_config(str(exc)))
        raise typer.Exit(1) from exc

    configure_logging("DEBUG" if verbose else cfg.logging.level)
    ctx.obj = CliState(config=cfg, db_path=db_file or cfg.store.path)

    if ctx.invoked_subcommand is None:
        random_cmd(ctx)


app.command("ingest")(ingest_cmd)
app.command("delete")(delete_cmd)
app.command("random")(random_cmd)
app.command("search")(search_cmd)
app.command("info")(info_cmd)
app.command("serve")(serve_cmd)


@app.command("version")
def version_cmd() -> None:
    """Show the installed fortune2 version."""
    typer.echo(f"fortune2 {_installed_version()}")


if __name__ == "__main__":
    app()

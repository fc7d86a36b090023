"""fortune2 rich error messages — actionable feedback.

Every error shown to the user must contain:
  1. What went wrong (clear cause)
  2. The exact action the user should take to fix it

Usage:
    from fortune2.cli.errors import err_no_jars
    console.print(err_no_jars())
    raise typer.Exit(1)
"""

from __future__ import annotations

from rich.markup import escape


def err_no_jars() -> str:
    """The database holds no jars."""
    return (
        "[red]Error:[/] No fortune jars yet.\n"
        "  Run:  fortune2 ingest <file>  to initialize one."
    )


def err_jar_not_found(jar: str, known: list[str]) -> str:
    """A requested jar does not exist."""
    known_list = ", ".join(escape(j) for j in known) if known else "(none)"
    return (
        f"[red]Error:[/] Jar '{escape(jar)}' does not exist.\n"
        f"  Known jars: {known_list}\n"
        "  Run:  fortune2 info  to list all jars."
    )


def err_empty_jar(jar: str) -> str:
    """A jar exists but holds no fortunes."""
    return (
        f"[red]Error:[/] Jar '{escape(jar)}' has no fortunes.\n"
        f"  Re-ingest its source file:  fortune2 ingest {escape(jar)}.txt"
    )


def err_fortune_not_found(jar: str, fortune_id: int) -> str:
    return (
        f"[red]Error:[/] Jar '{escape(jar)}' has no fortune #{fortune_id}.\n"
        "  Run:  fortune2 info  to see how many fortunes each jar holds."
    )


def err_store(message: str, db_path: str) -> str:
    """The database could not be opened or written."""
    return (
        f"[red]Error:[/] {escape(message)}\n"
        f"  Check that '{escape(db_path)}' is writable, or use:  fortune2 -F <path> ...\n"
        "  or:   export FORTUNE2FILE=<path>"
    )


def err_ingest(message: str) -> str:
    """A source file could not be ingested."""
    return (
        f"[red]Error:[/] {escape(message)}\n"
        "  Check the path and run:  fortune2 ingest <file>"
    )


def err_invalid_pattern(pattern: str, reason: str) -> str:
    return (
        f"[red]Error:[/] Invalid search pattern '{escape(pattern)}': {escape(reason)}\n"
        "  Use a Python regular expression, e.g.:  fortune2 search 'ship|sail'"
    )


def err_config(message: str) -> str:
    """A config file or environment variable holds an invalid value."""
    return (
        f"[red]Error:[/] {escape(message)}\n"
        "  Fix fortune2.yaml or ~/.fortune2/config.yaml and try again."
    )


def warn_jar_not_found(jar: str) -> str:
    """Non-fatal: a jar named for deletion does not exist."""
    return (
        f"[yellow]Jar not found:[/] '{escape(jar)}' is not in the database.\n"
        "  Run:  fortune2 info  to see all jars."
    )

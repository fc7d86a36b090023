"""fortune2 serve — run the HTTP API."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from fortune2.cli.state import console, get_state
from fortune2.web.app import create_app


def serve_cmd(
    ctx: typer.Context,
    port: Annotated[
        int | None,
        typer.Argument(help="TCP port (default: server.port, 8000).", show_default=False),
    ] = None,
    host: Annotated[
        str | None,
        typer.Option("--host", help="Interface to bind (default: server.host)."),
    ] = None,
    asset_dir: Annotated[
        Path | None,
        typer.Option("--asset-dir", help="Directory served under /asset/."),
    ] = None,
) -> None:
    """Serve fortunes over HTTP."""
    state = get_state(ctx)
    server = state.config.server
    bind_host = host or server.host
    bind_port = port or server.port

    app = create_app(
        state.db_path,
        asset_dir=asset_dir or server.asset_dir,
        default_mode=state.config.selection.mode,
    )

    console.print(f"Serving '{escape(str(state.db_path))}' on http://{bind_host}:{bind_port}/ ...")
    app.run(host=bind_host, port=bind_port, threaded=True)

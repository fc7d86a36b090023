"""Flask application factory for the fortune2 HTTP API.

Each request opens its own SQLite connection on first use and closes it when
the app context is torn down. The only state shared between requests is the
database file and one ``random.Random`` instance.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

from flask import Flask, Response, current_app, g, jsonify, request

from fortune2.db.connection import Database
from fortune2.db.repository import JarRepository
from fortune2.errors import (
    EmptyJarError,
    Fortune2Error,
    FortuneNotFoundError,
    InvalidPatternError,
    JarNotFoundError,
    NoJarsError,
)
from fortune2.render import OutputFormat
from fortune2.selection import SelectionMode, Selector

log = logging.getLogger(__name__)

_NOT_FOUND = (JarNotFoundError, EmptyJarError, FortuneNotFoundError, NoJarsError)


def create_app(
    db_path: Path | str,
    asset_dir: Path | str | None = None,
    default_mode: SelectionMode = SelectionMode.WEIGHTED,
    rng: random.Random | None = None,
) -> Flask:
    """Build the Flask app serving fortunes from *db_path*.

    Args:
        db_path: SQLite fortune database.
        asset_dir: Directory served under ``/asset/``; the route is disabled
            when None.
        default_mode: Jar selection mode when the request has no ``sw=e``.
        rng: Random source shared by all requests (for reproducible tests).
    """
    from fortune2.web.views import bp

    app = Flask(__name__, static_folder=None)
    app.config.update(
        FORTUNE2_DB=Path(db_path),
        FORTUNE2_ASSET_DIR=Path(asset_dir).resolve() if asset_dir is not None else None,
        FORTUNE2_MODE=default_mode,
    )
    app.extensions["fortune2_rng"] = rng if rng is not None else random.Random()

    app.register_blueprint(bp)
    app.teardown_appcontext(_close_db)
    app.register_error_handler(Fortune2Error, _handle_error)
    app.after_request(_log_request)

    return app


def get_repo() -> JarRepository:
    """Return the repository for the current request, opening it on first use."""
    if "repo" not in g:
        g.db_conn = Database(current_app.config["FORTUNE2_DB"]).connect(check_same_thread=False)
        g.repo = JarRepository(g.db_conn)
    return g.repo


def get_selector() -> Selector:
    return Selector(get_repo(), rng=current_app.extensions["fortune2_rng"])


def _close_db(exc: BaseException | None) -> None:
    conn = g.pop("db_conn", None)
    g.pop("repo", None)
    if conn is not None:
        conn.close()


def _handle_error(exc: Fortune2Error) -> tuple:
    if isinstance(exc, _NOT_FOUND):
        status = 404
    elif isinstance(exc, InvalidPatternError):
        status = 400
    else:
        log.error("request %s failed: %s", request.path, exc)
        status = 500

    if OutputFormat.parse(request.args.get("outputfmt")) is OutputFormat.JSON:
        return jsonify(error=str(exc)), status
    return f"{exc}\n", status, {"Content-Type": "text/plain; charset=utf-8"}


def _log_request(response: Response) -> Response:
    log.info("%s %s -> %s", request.method, request.full_path.rstrip("?"), response.status_code)
    return response

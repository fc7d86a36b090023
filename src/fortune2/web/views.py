"""HTTP routes.

  GET /fortune/[<jar>[/<index>]]?jars=a,b&sw=ec&outputfmt=plain|htmlpre|html|json
  GET /info/?jars=a,b&outputfmt=json
  GET /?outputfmt=html           help page
  GET /fortuneweb/?jar=&jarid=   browse page
  GET /asset/<path>              static files

A jar (and index) in the path take precedence over ``jars=``. In ``sw``,
``e`` selects jars uniformly and ``c`` prints the jar name.
"""

from __future__ import annotations

from flask import Blueprint, Response, abort, current_app, render_template, request, send_from_directory

from fortune2.errors import EmptyJarError, FortuneNotFoundError, JarNotFoundError, NoJarsError
from fortune2.render import (
    OutputFormat,
    content_type,
    render_fortune,
    render_jar_stats,
    render_jar_stats_json,
)
from fortune2.selection import SelectionMode
from fortune2.stats import jars_info
from fortune2.web.app import get_repo, get_selector

bp = Blueprint("fortune2", __name__, template_folder="templates")

_RANDOM_JAR = "(random)"


def _requested_jars() -> list[str]:
    raw = request.args.get("jars", "")
    return [j for j in raw.split(",") if j]


@bp.get("/fortune/", defaults={"jar": None, "index": None}, strict_slashes=False)
@bp.get("/fortune/<jar>", defaults={"index": None}, strict_slashes=False)
@bp.get("/fortune/<jar>/<int:index>")
def fortune(jar: str | None, index: int | None) -> Response:
    fmt = OutputFormat.parse(request.args.get("outputfmt"))
    switches = set(request.args.get("sw", ""))
    selector = get_selector()

    if jar and index is not None:
        picked = selector.lookup(jar, index)
    elif jar:
        picked = selector.draw(jar)
    else:
        mode = SelectionMode.UNIFORM if "e" in switches else current_app.config["FORTUNE2_MODE"]
        picked = selector.random_fortune(_requested_jars(), mode)

    resp = Response(render_fortune(picked, fmt, show_jar="c" in switches), content_type=content_type(fmt))
    resp.headers["Access-Control-Allow-Origin"] = "*"
    return resp


@bp.get("/info/", strict_slashes=False)
def info() -> Response:
    fmt = OutputFormat.parse(request.args.get("outputfmt"))
    infos = jars_info(get_repo(), _requested_jars())

    if fmt is OutputFormat.JSON:
        return Response(render_jar_stats_json(infos), content_type=content_type(fmt))
    return Response(render_jar_stats(infos), content_type=content_type(OutputFormat.PLAIN))


@bp.get("/")
def help_page() -> Response:
    if request.args.get("outputfmt") == "html":
        return Response(render_template("help.html"), content_type=content_type(OutputFormat.HTML))
    return Response(render_template("help.txt"), content_type=content_type(OutputFormat.PLAIN))


@bp.get("/fortuneweb/", strict_slashes=False)
def fortuneweb() -> tuple[str, int]:
    jar = request.args.get("jar", "").strip()
    jarid = request.args.get("jarid", "").strip()
    if jar == _RANDOM_JAR:
        jar = ""

    selector = get_selector()
    picked = None
    try:
        if jar and jarid:
            if not jarid.isdigit():
                raise FortuneNotFoundError(jar, -1)
            picked = selector.lookup(jar, int(jarid))
        elif jar:
            picked = selector.draw(jar)
        else:
            picked = selector.random_fortune(None, current_app.config["FORTUNE2_MODE"])
    except (JarNotFoundError, EmptyJarError, FortuneNotFoundError, NoJarsError):
        picked = None

    page = render_template(
        "fortuneweb.html",
        fortune=picked,
        jars=get_repo().list_jars(),
        qjar=jar,
        qjarid=jarid,
        random_jar=_RANDOM_JAR,
    )
    return page, 200 if picked is not None else 404


@bp.get("/asset/<path:filename>")
def asset(filename: str) -> Response:
    asset_dir = current_app.config["FORTUNE2_ASSET_DIR"]
    if asset_dir is None:
        abort(404)
    return send_from_directory(asset_dir, filename)

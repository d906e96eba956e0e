"""The web application that records counts and produces reports."""

import argparse
import functools
import itertools
import logging
import re
import subprocess
from pathlib import Path
from typing import Optional, Sequence, Union

from flask import Flask, Response, redirect, request, send_from_directory
from jinja2 import Environment, FileSystemLoader, TemplateError

from .entries import Entry, non_empty_value, parse_date
from .kebab import kebab_case, undo_kebab_case
from .reports import convert_to_headings, generate_reports, write_reports_file

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

_INTEGER = re.compile(r"[+-]?[0-9]+")

_DOWNLOAD_LINK = """
<a href="report.pdf"
     download="report.pdf">
    Download!
</a>
"""


def _atoi(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def _trigger_id() -> int:
    return _atoi(request.headers.get("Hx-Trigger", ""))


def _fail(err: Exception) -> Response:
    log.error("%s", err)
    response = Response(f"{err}\n", status=500, mimetype="text/plain")
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


def create_app(assets_dir: PathLike = "assets", app_dir: PathLike = "app") -> Flask:
    """Build the application serving *app_dir* and rendering templates from *assets_dir*."""
    assets_path = Path(assets_dir).resolve()
    app_path = Path(app_dir).resolve()

    app = Flask(__name__, static_folder=None)
    counts: dict[int, Entry] = {}
    app.config["COUNTS"] = counts

    env = Environment(loader=FileSystemLoader(str(assets_path)), autoescape=True)
    for name, func in (("kebab_case", kebab_case), ("undo_kebab_case", undo_kebab_case)):
        env.filters[name] = func
        env.globals[name] = func
    env.globals["inc"] = functools.partial(next, itertools.count(1))

    for exc in (ValueError, OSError, TemplateError, subprocess.SubprocessError):
        app.register_error_handler(exc, _fail)

    @app.get("/")
    def root():
        return redirect("/app", code=303)

    @app.get("/app/")
    @app.get("/app/<path:filename>")
    def static_app(filename: str = "index.html"):
        return send_from_directory(app_path, filename)

    @app.get("/date/<item_name>")
    def get_date(item_name: str):
        log.info("Serving %s %s", request.method, request.path)
        return env.get_template("datepicker.html").render(item_name=item_name)

    @app.post("/date/<item_name>")
    def post_date(item_name: str):
        log.info("Serving %s %s", request.method, request.path)
        date = parse_date(request.form.get("date", ""))
        return env.get_template("entry.html").render(item_name=item_name, date=date)

    @app.delete("/date")
    def delete_date():
        log.info("Serving %s %s", request.method, request.path)
        # The entry being removed belongs to the counter whose id is one
        # less than that of the delete button.
        counts.pop(_trigger_id() - 1, None)
        log.info("Counts: %r", counts)
        return ""

    @app.post("/count/<item_name>/<date>")
    def post_count(item_name: str, date: str):
        log.info("Serving %s %s", request.method, request.path)
        count = _atoi(request.form.get("count", ""))
        entry = Entry(non_empty_value(item_name), non_empty_value(date), count)
        counts[_trigger_id()] = entry
        log.info("Counts: %r", counts)
        return f"<span>{count}</span>"

    @app.get("/report")
    def get_report():
        log.info("Serving %s %s", request.method, request.path)
        reports = generate_reports(counts)
        log.info("Reports: %r", reports)
        headings = convert_to_headings(reports)
        log.info("Headings: %r", headings)
        write_reports_file(headings, assets_path, app_path / "report.html")
        return redirect("/app/report.html", code=303)

    @app.get("/prepare")
    def get_prepare():
        log.info("Serving %s %s", request.method, request.path)
        subprocess.run(
            [
                "wkhtmltopdf",
                f"{request.host_url}app/report.html",
                str(app_path / "report.pdf"),
            ],
            check=True,
        )
        return _DOWNLOAD_LINK

    @app.delete("/entries")
    def delete_entries():
        log.info("Serving %s %s", request.method, request.path)
        counts.clear()
        log.info("Counts: %r", counts)
        return ""

    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the web server."""
    parser = argparse.ArgumentParser(description="Serve the juice tally application.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--assets", default="assets", help="template directory")
    parser.add_argument("--app", default="app", help="directory of served pages")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(filename)s:%(lineno)d: %(message)s",
    )
    create_app(args.assets, args.app).run(host=args.host, port=args.port)
    return 0
"""HTTP application exposing the monitor page and its JSON API."""

from __future__ import annotations

import os
from pathlib import Path

from flask import Flask, jsonify, send_from_directory

from .models import fail_msg, success_msg
from .parsing import TableFormatError
from .service import CommandError, get_connectors, get_node, get_peers

_QUERY_ERRORS = (CommandError, TableFormatError)


def create_app(cli_path: str, static_dir: str | os.PathLike[str] | None = None) -> Flask:
    """Build the Flask application querying the CLI at ``cli_path``.

    ``static_dir`` holds index.html and the other page assets; it defaults
    to the ``static`` directory beside this module.
    """
    static_path = Path(static_dir) if static_dir is not None else Path(__file__).parent / "static"
    static_path = static_path.resolve()
    app = Flask(
        __name__,
        static_folder=str(static_path),
        static_url_path="/static",
    )

    @app.get("/")
    def index():
        return send_from_directory(str(static_path), "index.html")

    @app.get("/api/peer")
    def peer():
        try:
            peers = get_peers(cli_path)
        except _QUERY_ERRORS as exc:
            return jsonify(fail_msg(str(exc)).to_dict())
        return jsonify(success_msg(len(peers), peers).to_dict())

    @app.get("/api/node")
    def node():
        try:
            info = get_node(cli_path)
        except _QUERY_ERRORS as exc:
            return jsonify(fail_msg(str(exc)).to_dict())
        return jsonify(success_msg(1, info).to_dict())

    @app.get("/api/connector")
    def connector():
        try:
            connectors = get_connectors(cli_path)
        except _QUERY_ERRORS as exc:
            return jsonify(fail_msg(str(exc)).to_dict())
        return jsonify(success_msg(1, connectors).to_dict())

    return app
from __future__ import annotations

"""
Graph Preview Server.

Small Flask application serving an HTML page that renders the dependency
graph with cytoscape. The element definitions are read from the JSON file
produced by the visual graph printer on every request, so re-running an
analysis is reflected by a browser reload.
"""

import json
import logging
import os
from typing import Any, List

from flask import Flask, Response, abort, jsonify, render_template

from verif.domain import constants as const

logger = logging.getLogger(__name__)


def load_elements(elements_path: str) -> List[Any]:
    """
    Read graph elements from disk.

    Returns an empty list when the file does not exist yet.
    """
    if not os.path.exists(elements_path):
        logger.warning(f"Graph elements file not found: {elements_path}")
        return []
    with open(elements_path, "r", encoding="utf-8") as f:
        return json.load(f)


def create_app(elements_path: str) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        elements_path: JSON file holding cytoscape element definitions.

    Returns:
        Flask: Configured application.
    """
    app = Flask(__name__)
    app.config["ELEMENTS_PATH"] = elements_path

    @app.route("/")
    @app.route("/index.html")
    def index() -> str:
        return render_template("index.html", cytoscape_url=const.CYTOSCAPE_CDN_URL)

    @app.route("/cy.client.js")
    def client_script() -> Response:
        source = render_template(
            "cy.client.js",
            elements=load_elements(app.config["ELEMENTS_PATH"]),
        )
        return Response(source, mimetype="application/javascript")

    @app.route("/elements.json")
    def elements() -> Response:
        path = app.config["ELEMENTS_PATH"]
        if not os.path.exists(path):
            abort(404)
        return jsonify(load_elements(path))

    return app


def run_server(
        elements_path: str,
        host: str = const.DEFAULT_HOST,
        port: int = const.DEFAULT_PORT,
) -> None:
    """
    Serve the graph preview until interrupted.

    Args:
        elements_path: JSON file holding cytoscape element definitions.
        host: Interface to bind.
        port: TCP port to listen on.
    """
    app = create_app(elements_path)
    logger.info(f"Graph visualizing server listening on http://{host}:{port}/")
    app.run(host=host, port=port, debug=False, use_reloader=False)

# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Flask service rendering RackML and rack-text sources to SVG."""

from __future__ import annotations

import logging
import os

from flask import Flask, Response, jsonify, request

from config import Settings, load_settings
from models import FormatError
from services.convert import DIALECTS, parse_source
from services.links import make_link_resolver, rewrite_links
from services.render_svg import generate_svg

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> Flask:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)

    app = Flask(__name__)
    app.secret_key = os.environ.get("SECRET_KEY", "dev-secret")
    app.config["MAX_CONTENT_LENGTH"] = settings.max_content_length
    app.config["RACKVIZ_SETTINGS"] = settings

    resolver = (
        make_link_resolver(settings.internal_link_base) if settings.internal_link_base else None
    )

    @app.get("/")
    def index() -> Response:
        return jsonify(
            {"dialects": sorted(DIALECTS), "default_dialect": settings.default_dialect}
        )

    @app.post("/render")
    def render_default() -> tuple[Response, int] | Response:
        return _render(settings.default_dialect)

    @app.post("/render/<dialect>")
    def render(dialect: str) -> tuple[Response, int] | Response:
        return _render(dialect)

    def _render(dialect: str) -> tuple[Response, int] | Response:
        if dialect not in DIALECTS:
            return jsonify({"error": f"unsupported dialect: {dialect}"}), 404
        source = request.form.get("source") or request.get_data(as_text=True)
        if not source.strip():
            return jsonify({"error": "empty source"}), 400
        try:
            rack_set = parse_source(dialect, source)
        except FormatError as exc:
            logger.warning("rejected %s source: %s", dialect, exc)
            return jsonify({"error": exc.message, "line": exc.line}), 400

        tallest = max((rack.height for rack in rack_set.racks), default=0)
        if tallest > settings.max_rack_height:
            logger.warning("rejected %s source: rack height %d over limit", dialect, tallest)
            return (
                jsonify(
                    {
                        "error": f"rack height {tallest} exceeds limit of {settings.max_rack_height}",
                        "line": None,
                    }
                ),
                400,
            )

        if resolver is not None:
            rewrite_links(rack_set, resolver)
        return Response(generate_svg(rack_set), mimetype="image/svg+xml")

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from sqlalchemy.engine import Engine

from forum.infrastructure.maintenance import check_database
from forum.infrastructure.observability import metrics_enabled, render_latest


class MiscController:
    def __init__(self, *, engine: Engine) -> None:
        self._engine = engine

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        if metrics_enabled():
            bp.add_url_rule("/api/metrics", view_func=self.metrics, methods=["GET"])
        return bp

    def health(self):
        database_ok = check_database(self._engine)
        status = {"ok": database_ok, "database": "ok" if database_ok else "unavailable"}
        return jsonify(status), 200 if database_ok else 503

    def metrics(self) -> Response:
        body, content_type = render_latest()
        return Response(body, mimetype=content_type)

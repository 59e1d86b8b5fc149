# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from forum.application.services.presence_tracker import PresenceTracker
from forum.infrastructure.observability import record_online


class PresenceController:
    def __init__(self, *, presence: PresenceTracker) -> None:
        self._presence = presence

    def online_users(self) -> Response:
        nicknames = self._presence.online_users()
        record_online(len(nicknames))
        return jsonify(nicknames)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("presence", __name__, url_prefix="/api")
        bp.add_url_rule("/online-users", view_func=self.online_users, methods=["GET"])
        return bp

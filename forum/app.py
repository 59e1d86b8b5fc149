# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import atexit
import os
import threading

from flask import Flask
from flask_cors import CORS

from forum.container import container
from forum.infrastructure.db import init_db
from forum.shared.config import load_config
from forum.shared.logging import logger, setup_logging
from forum.shared.middleware.error_handler import configure_error_handling
from forum.shared.middleware.request_logger import configure_request_logging

_config = load_config()
_BOOTSTRAPPED = threading.Event()


def _should_boot() -> bool:
    if os.environ.get("FORUM_BOOT_WORKERS") == "1":
        return True
    return os.environ.get("WERKZEUG_RUN_MAIN") == "true"


def create_app() -> Flask:
    init_db()
    setup_logging(debug_mode=_config.debug_logging)

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": _config.security.allowed_origins}}
    }
    if any(o != "*" for o in _config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.presence_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())

    if _should_boot() and not _BOOTSTRAPPED.is_set():
        _BOOTSTRAPPED.set()
        container.session_sweeper.start()
        atexit.register(container.session_sweeper.stop)

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )

        if _config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(
        f"Flask app initialized sessions={_config.sessions.backend} "
        f"ttl={_config.sessions.ttl_hours}h"
    )
    return app


app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)

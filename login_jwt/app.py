# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask, Response
from flask_cors import CORS

from login_jwt.infrastructure.container import Container, container
from login_jwt.infrastructure.db import init_db
from login_jwt.shared.config import load_config
from login_jwt.shared.logging import logger, setup_logging
from login_jwt.shared.middleware.error_handler import configure_error_handling
from login_jwt.shared.middleware.request_logger import configure_request_logging

CORS_METHODS = ["GET", "POST", "PUT", "DELETE"]
CORS_HEADERS = ["Origin", "Content-Type", "Accept", "Authorization"]


def create_app(app_container: Container | None = None) -> Flask:
    app_container = app_container or container
    config = app_container.config

    setup_logging(debug_mode=config.debug_logging)
    init_db()

    app = Flask(__name__)
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    CORS(
        app,
        origins=config.security.allowed_origins,
        methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        send_wildcard="*" in config.security.allowed_origins,
    )
    if config.is_production():
        for warning in config.insecure_settings():
            logger.warning(f"Production security warning: {warning}")

    app.register_blueprint(app_container.misc_controller.as_blueprint())
    app.register_blueprint(app_container.auth_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    _config = load_config()
    create_app().run(host=_config.api_host, port=_config.api_port, debug=_config.debug_logging)

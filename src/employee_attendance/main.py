from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from .attendance.controller import register as register_attendance
from .config import Settings, load_settings
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .logging_config import configure_logging
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, *, container: Optional[Container] = None) -> Flask:
    if settings is None:
        load_dotenv(override=False)
        settings = load_settings()

    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["DEBUG"] = settings.debug
    app.config["TESTING"] = settings.testing
    app.config["PORT"] = settings.port

    logger.info("Starting attendance service (store=%s)", settings.store)

    if settings.store == "mysql" and settings.auto_init_db and container is None:
        apply_schema(settings.db_config)
        logger.info("Schema ready (tables=%d)", len(list_tables(settings.db_config)))

    CORS(
        app,
        origins=list(settings.cors_origins),
        methods=["GET", "POST", "PUT", "DELETE"],
        supports_credentials=True,
    )

    container = container or build_container(settings)

    register_users(app, container)
    register_attendance(app, container)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app


def run() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=int(app.config["PORT"]), debug=bool(app.config["DEBUG"]))


if __name__ == "__main__":
    run()

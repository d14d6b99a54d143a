"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
configure logging, enable CORS, wire the persistence adapter into the
service layer, and register route blueprints.
"""

from __future__ import annotations

import logging
from typing import Optional, Type

from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from blueprints_backend.config import Config
from blueprints_backend.persistence import BlueprintPersistence, build_persistence
from blueprints_backend.routes.blueprints import blueprints_bp
from blueprints_backend.routes.docs import docs_bp
from blueprints_backend.schemas import ApiResponse
from blueprints_backend.services.blueprints_service import BlueprintsService


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return ApiResponse.error(e.code or 500, e.description or e.name).to_response()

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logging.exception("Unhandled error while serving request")
        return ApiResponse.internal_error().to_response()


def create_app(cfg: Type[Config] = Config, persistence: Optional[BlueprintPersistence] = None) -> Flask:
    _configure_logging(cfg.LOG_LEVEL)

    app = Flask(__name__)
    # Basic config
    app.config.from_object(cfg)

    if persistence is None:
        persistence = build_persistence(cfg)
    app.extensions["blueprints_persistence"] = persistence
    app.extensions["blueprints_service"] = BlueprintsService(persistence)

    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        supports_credentials=False,
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "PUT", "OPTIONS"],
    )

    # Blueprints
    app.register_blueprint(blueprints_bp, url_prefix=cfg.API_PREFIX or None)
    app.register_blueprint(docs_bp)
    _register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app

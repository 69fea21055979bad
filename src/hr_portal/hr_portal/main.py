from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .core.constants import (
    DEFAULT_ATTENDANCE_TIMEZONE,
    DEFAULT_DISCONNECTION_THRESHOLD,
    DEFAULT_REGULARIZATION_WINDOW_DAYS,
)
from .core.exceptions import AuthorizationError, InvalidStateError, NotFoundError, StorageError, ValidationError
from .database.bootstrap import apply_schema, list_tables
from .logging_utils import setup_logging

from .container import build_container, build_store
from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .requests.controller import register as register_requests

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    def _error(kind: str, exc: Exception, status: int):
        return jsonify({"error": kind, "message": str(exc)}), status

    @app.errorhandler(ValidationError)
    def on_validation_error(exc: ValidationError):
        return _error("validation_error", exc, 400)

    @app.errorhandler(AuthorizationError)
    def on_authorization_error(exc: AuthorizationError):
        return _error("forbidden", exc, 403)

    @app.errorhandler(NotFoundError)
    def on_not_found(exc: NotFoundError):
        return _error("not_found", exc, 404)

    @app.errorhandler(InvalidStateError)
    def on_invalid_state(exc: InvalidStateError):
        return _error("invalid_state", exc, 409)

    @app.errorhandler(StorageError)
    def on_storage_error(exc: StorageError):
        logger.exception("storage_error")
        return _error("storage_unavailable", exc, 503)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), json_output=bool(getattr(settings, "LOG_JSON", True)))

    backend = getattr(settings, "STORE_BACKEND", "memory")
    db_config = getattr(settings, "DB_CONFIG", None)
    logger.info("startup", extra={"settings": settings_module, "store_backend": backend})

    if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config)
        logger.info("schema_ready", extra={"tables": len(list_tables(db_config))})

    container = build_container(
        store=build_store(backend=backend, db_config=db_config),
        employees=getattr(settings, "EMPLOYEES", ()),
        timezone=getattr(settings, "ATTENDANCE_TIMEZONE", DEFAULT_ATTENDANCE_TIMEZONE),
        disconnection_threshold=getattr(settings, "DISCONNECTION_THRESHOLD", DEFAULT_DISCONNECTION_THRESHOLD),
        regularization_window_days=getattr(settings, "REGULARIZATION_WINDOW_DAYS", DEFAULT_REGULARIZATION_WINDOW_DAYS),
    )
    app.extensions["hr_portal"] = container

    register_error_handlers(app)
    register_attendance(app, container)
    register_requests(app, container)
    register_dashboard(app, container)

    return app

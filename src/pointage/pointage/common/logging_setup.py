"""Logging setup for the Flask app and the engine's module loggers."""
from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..core.exceptions import DomainError
from .web import HTTP_STATUS

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(app: Flask, *, level: str = "INFO") -> logging.Logger:
    log_level = getattr(logging, str(level).upper(), logging.INFO)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    app.logger.setLevel(log_level)
    app.logger.addHandler(handler)

    # Services log under the package name (pointage.attendance.service, ...).
    package_logger = logging.getLogger(__name__.split(".")[0])
    package_logger.setLevel(log_level)
    if not package_logger.handlers:
        package_logger.addHandler(handler)

    return app.logger


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def domain_error(error: DomainError):
        app.logger.warning("Unhandled domain error: %s", error.kind.value)
        return jsonify({"success": False, **error.to_dict()}), HTTP_STATUS.get(error.kind, 400)

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.error("Internal server error: %s", error)
        return jsonify({"success": False, "error": "InternalError", "message": "Internal server error"}), 500

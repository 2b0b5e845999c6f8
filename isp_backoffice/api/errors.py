"""
Translation of errors into HTTP responses.

Every response produced here has the body
``{"message": str, "errors": [{"field": str, "field_errors": [str]}] | null}``.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from isp_backoffice.errors import BackofficeError, BusinessRuleViolation, StoreFailure

logger = logging.getLogger(__name__)


def _error_response(message: str, status_code: int, errors=None):
    return jsonify({"message": message, "errors": errors}), status_code


def register_error_handlers(app: Flask) -> None:
    """Install the JSON error handlers on the app."""

    @app.errorhandler(BackofficeError)
    def handle_backoffice_error(error: BackofficeError):
        extra = {"component": "api", "error_kind": error.kind}
        if isinstance(error, BusinessRuleViolation):
            extra["rule"] = error.rule
            extra["context"] = error.context

        if isinstance(error, StoreFailure):
            logger.error(
                "Store failure: %s",
                error.original,
                exc_info=error.original,
                extra=extra,
            )
        else:
            logger.warning("Request rejected: %s", error.message, extra=extra)

        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        if error.code == 404:
            message = "Not Found"
        elif error.code == 405:
            message = "Method Not Allowed"
        else:
            message = error.name
        return _error_response(message, error.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.exception(
            "Unhandled error",
            extra={"component": "api"},
        )
        return _error_response("Internal Server Error", 500)

"""
Shared Flask extensions: db, JSON logging, request ids.
"""

import json
import logging
import os
import sqlite3
import uuid
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict

from flask import Flask, g, has_request_context, request
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

# Global SQLAlchemy instance, bound to the app in create_app()
db = SQLAlchemy()

REQUEST_ID_HEADER = "X-Request-ID"


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite ignores ON DELETE RESTRICT unless foreign keys are switched on."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class RequestContextFilter(logging.Filter):
    """Stamps records emitted while serving a request with its id, method and path."""

    def filter(self, record: logging.LogRecord) -> bool:
        if has_request_context():
            record.request_id = getattr(g, "request_id", None)
            record.method = request.method
            record.path = request.path
        return True


class JsonFormatter(logging.Formatter):
    """
    One JSON object per log record.

    Top level: timestamp (UTC), level, logger, message, plus the request
    fields (request_id, method, path) and the domain keys ``action``,
    ``rule`` and ``error_kind`` when the record carries them. Every other
    ``extra={...}`` field goes under ``extra``.
    """

    top_level_fields = ("request_id", "method", "path", "action", "rule", "error_kind")

    record_attrs = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: Dict[str, Any] = {
            "timestamp": timestamp.strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in self.top_level_fields:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value

        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in self.record_attrs and key not in self.top_level_fields
        }
        if extra:
            entry["extra"] = extra
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)

        # Decimal amounts and datetimes fall back to str()
        return json.dumps(entry, ensure_ascii=False, default=str)


def init_extensions(app: Flask) -> None:
    """Bind the database and install logging plus request ids. Called from create_app()."""
    db.init_app(app)
    _init_logging(app)
    _init_request_ids(app)


def _init_request_ids(app: Flask) -> None:
    """Reuse the caller's X-Request-ID or mint one, and echo it on the response."""

    @app.before_request
    def _assign_request_id() -> None:
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

    @app.after_request
    def _echo_request_id(response):
        request_id = getattr(g, "request_id", None)
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _init_logging(app: Flask) -> None:
    """
    JSON logging on the root logger: rotating file under LOG_DIR plus console.

    create_app runs once per test, so the handlers are installed only the
    first time; later calls just adjust the level.
    """
    log_dir = app.config.get("LOG_DIR")
    log_file_name = app.config.get("LOG_FILE_NAME", "app.log")
    log_level_name = app.config.get("LOG_LEVEL", "INFO")
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not getattr(root_logger, "_isp_backoffice_handlers", False):
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(log_dir, log_file_name)

        formatter = JsonFormatter()
        context_filter = RequestContextFilter()

        file_handler = RotatingFileHandler(
            log_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        console_handler = logging.StreamHandler()
        for handler in (file_handler, console_handler):
            handler.setFormatter(formatter)
            handler.addFilter(context_filter)
            root_logger.addHandler(handler)
        root_logger._isp_backoffice_handlers = True  # type: ignore[attr-defined]

        app.logger.info(
            "JSON logging initialised.",
            extra={"component": "logging", "log_path": log_path},
        )

    for handler in root_logger.handlers:
        if isinstance(handler.formatter, JsonFormatter):
            handler.setLevel(log_level)

    app.logger.setLevel(log_level)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

"""Structured events emitted by the services after a successful mutation."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from isp_backoffice.services.dto.fields import format_timestamp

events_logger = logging.getLogger("isp_backoffice.events")


def _loggable(value: Any) -> Any:
    # same textual form the API uses for amounts and timestamps
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    return value


def log_structured_event(
    action: str,
    *,
    message: Optional[str] = None,
    level: str = "info",
    **fields: Any,
) -> None:
    """Log ``action`` with its entity ids and values as JSON extra fields.

    The JSON handlers live on the root logger (see ``extensions``). A failure
    while emitting the record is reported at debug level and never reaches
    the caller, whose transaction is already committed.
    """
    log_method = getattr(events_logger, level.lower(), events_logger.info)

    payload: Dict[str, Any] = {"action": action}
    payload.update({name: _loggable(value) for name, value in fields.items()})

    try:
        log_method(message or f"{action} completed", extra=payload)
    except Exception:
        events_logger.debug("Structured event %s could not be logged", action, exc_info=True)

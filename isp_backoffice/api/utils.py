"""Helpers shared by the API blueprints."""

from __future__ import annotations

from typing import Any

from flask import request

from isp_backoffice.errors import MalformedRequest


def json_body() -> Any:
    """Returns the decoded JSON body or raises MalformedRequest."""
    data = request.get_json(silent=True)
    if data is None:
        raise MalformedRequest("Body is missing or is not valid JSON")
    return data

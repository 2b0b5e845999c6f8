"""Parsing helpers shared by the request DTOs."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional, Sequence

from isp_backoffice.errors import FieldError, FieldValidation, MalformedRequest

REQUIRED = "This field is required"

# ids are unsigned 32-bit; amounts are Numeric(15, 2)
MAX_INTEGER = 4294967295
AMOUNT_PLACES = 2
AMOUNT_LIMIT = Decimal("10000000000000")


def parse_timestamp(value: Any) -> datetime:
    """
    Parses an ISO-8601 timestamp into a naive UTC datetime.

    Accepts a trailing ``Z``, an explicit offset (converted to UTC) or a
    plain date. Naive values are taken as UTC.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Expected an ISO-8601 timestamp")
    raw = value.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


class FieldReader:
    """
    Reads typed fields out of a JSON object, collecting every failure.

    Each reader returns None when the field is missing or invalid and records
    the reason; ``raise_if_errors`` turns the collected reasons into a single
    FieldValidation error.
    """

    def __init__(self, data: Any):
        if not isinstance(data, Mapping):
            raise MalformedRequest("Request body must be a JSON object")
        self.data = data
        self._errors: Dict[str, List[str]] = {}

    def error(self, name: str, reason: str) -> None:
        self._errors.setdefault(name, []).append(reason)

    def _raw(self, name: str) -> Any:
        value = self.data.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            self.error(name, REQUIRED)
            return None
        return value

    def integer(
        self,
        name: str,
        minimum: Optional[int] = None,
        maximum: Optional[int] = MAX_INTEGER,
    ) -> Optional[int]:
        value = self._raw(name)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            self.error(name, "Must be an integer")
            return None
        if minimum is not None and value < minimum:
            self.error(name, f"Must be greater than or equal to {minimum}")
            return None
        if maximum is not None and value > maximum:
            self.error(name, f"Must be less than or equal to {maximum}")
            return None
        return value

    def decimal(
        self,
        name: str,
        minimum: Optional[Decimal] = Decimal("0"),
        places: int = AMOUNT_PLACES,
        limit: Decimal = AMOUNT_LIMIT,
    ) -> Optional[Decimal]:
        """
        Reads an amount. ``places`` and ``limit`` mirror the Numeric(15, 2)
        columns: a value the column would round or reject is a field error.
        """
        value = self._raw(name)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            self.error(name, "Must be a number")
            return None
        try:
            parsed = Decimal(str(value))
        except InvalidOperation:
            self.error(name, "Must be a number")
            return None
        if not parsed.is_finite():
            self.error(name, "Must be a finite number")
            return None
        if minimum is not None and parsed < minimum:
            self.error(name, f"Must be greater than or equal to {minimum}")
            return None
        if parsed >= limit:
            self.error(name, f"Must be less than {limit:f}")
            return None
        if parsed.normalize().as_tuple().exponent < -places:
            self.error(name, f"At most {places} decimal places")
            return None
        return parsed

    def timestamp(self, name: str) -> Optional[datetime]:
        value = self._raw(name)
        if value is None:
            return None
        try:
            return parse_timestamp(value)
        except ValueError:
            self.error(name, "Must be an ISO-8601 timestamp")
            return None

    def text(
        self,
        name: str,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        pattern: Optional[re.Pattern] = None,
        pattern_message: str = "Invalid format",
    ) -> Optional[str]:
        value = self._raw(name)
        if value is None:
            return None
        if not isinstance(value, str):
            self.error(name, "Must be a string")
            return None
        value = value.strip()
        if min_length is not None and len(value) < min_length:
            self.error(name, f"Must be at least {min_length} characters long")
        if max_length is not None and len(value) > max_length:
            self.error(name, f"Must be at most {max_length} characters long")
        if pattern is not None and not pattern.match(value):
            self.error(name, pattern_message)
        return value

    def choice(self, name: str, choices: Sequence[str]) -> Optional[str]:
        value = self._raw(name)
        if value is None:
            return None
        if not isinstance(value, str) or value not in choices:
            self.error(name, f"Must be one of: {', '.join(choices)}")
            return None
        return value

    def raise_if_errors(self) -> None:
        if self._errors:
            raise FieldValidation(
                [FieldError(name, reasons) for name, reasons in self._errors.items()]
            )

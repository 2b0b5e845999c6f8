"""
Error taxonomy shared by services and API.

Every error raised on purpose by the application derives from
``BackofficeError`` and knows its HTTP status and its public message, so the
API layer can translate it without inspecting the concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class FieldError:
    field: str
    field_errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "field_errors": list(self.field_errors)}


class BackofficeError(Exception):
    """Base class of the application errors."""

    status_code = 400
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def field_errors(self) -> Optional[List[FieldError]]:
        return None

    def to_dict(self) -> Dict[str, Any]:
        errors = self.field_errors
        return {
            "message": self.message,
            "errors": [e.to_dict() for e in errors] if errors is not None else None,
        }


class NotFound(BackofficeError):
    """The entity addressed by the request does not exist."""

    status_code = 404
    kind = "not_found"

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ReferenceNotFound(BackofficeError):
    """A foreign key of a create request points to a missing row."""

    status_code = 404
    kind = "reference_not_found"

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class FieldValidation(BackofficeError):
    """Schema-level validation failure on one or more request fields."""

    kind = "field_validation"

    def __init__(self, errors: List[FieldError], message: str = "Validation failed"):
        super().__init__(message)
        self._errors = errors

    @classmethod
    def single(cls, field_name: str, reason: str) -> "FieldValidation":
        return cls([FieldError(field_name, [reason])])

    @property
    def field_errors(self) -> Optional[List[FieldError]]:
        return self._errors


class BusinessRuleViolation(BackofficeError):
    """A cross-field or cross-entity invariant would be broken."""

    kind = "business_rule"

    def __init__(self, rule: str, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.rule = rule
        self.context = context or {}


class MalformedRequest(BackofficeError):
    """The request body could not be deserialized."""

    kind = "malformed_request"

    def __init__(self, reason: str = ""):
        super().__init__("Invalid Body")
        self.reason = reason


class StoreFailure(BackofficeError):
    """
    Database or connectivity fault.

    The original exception is kept in ``original`` (and chained) for the
    logs; callers only ever see a generic message.
    """

    status_code = 500
    kind = "store_failure"

    def __init__(self, original: Optional[BaseException] = None):
        super().__init__("Internal Server Error")
        self.original = original

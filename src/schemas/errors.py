"""Error response schemas.

Request validation failures from every endpoint are reduced to the same shape:
one entry per violated field, all of them reported together.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

# Leading loc entries naming where the value came from, not which field it was
_LOCATION_PREFIXES = {"body", "path", "query", "header", "cookie"}


class FieldViolation(BaseModel):
    """A single violated field."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error body for every non-validation failure."""

    detail: str


class ValidationErrorResponse(BaseModel):
    """Error body for request validation failures."""

    detail: str = "Validation failed"
    errors: list[FieldViolation]


def field_name(loc: Iterable[Any]) -> str:
    """Turn a pydantic error location into a dotted field name."""
    parts = [str(part) for part in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def collect_violations(errors: Iterable[dict[str, Any]]) -> list[FieldViolation]:
    """Collect every pydantic error into field-level violations."""
    return [
        FieldViolation(field=field_name(error.get("loc", ())), message=error.get("msg", "Invalid"))
        for error in errors
    ]

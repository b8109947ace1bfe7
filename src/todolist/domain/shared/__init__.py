"""Shared domain building blocks (exceptions, time helpers)."""

from todolist.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InternalError,
    UnauthorizedError,
    ValidationError,
)
from todolist.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "InternalError",
    "UnauthorizedError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]

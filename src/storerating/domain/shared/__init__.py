"""Shared domain components.

This module exports the exception hierarchy and time helpers used across
domain boundaries.
"""

from storerating.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    UnauthenticatedError,
    ValidationError,
)
from storerating.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "UnauthenticatedError",
    "ForbiddenError",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]

# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy persistence for identity."""

from storerating_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from storerating_identity.infrastructure.persistence.sqlalchemy.models import (
    UserCredentialModel,
    UserModel,
)
from storerating_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
]

# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for stores and ratings."""

from storerating.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from storerating.infrastructure.persistence.sqlalchemy.repositories.rating_repository import (
    RatingRepositorySQLAlchemy,
)
from storerating.infrastructure.persistence.sqlalchemy.repositories.store_repository import (
    StoreRepositorySQLAlchemy,
)

__all__ = [
    "RatingRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "StoreRepositorySQLAlchemy",
]

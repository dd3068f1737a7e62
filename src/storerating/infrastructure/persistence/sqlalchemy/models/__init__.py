# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for stores and ratings."""

from storerating.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from storerating.infrastructure.persistence.sqlalchemy.models.rating_model import (
    RatingModel,
)
from storerating.infrastructure.persistence.sqlalchemy.models.store_model import (
    StoreModel,
)

__all__ = [
    "Base",
    "RatingModel",
    "StoreModel",
    "TimestampMixin",
]

"""SQLAlchemy declarative base for storerating_identity models.

Uses the same metadata as storerating's Base to allow cross-module foreign keys.
"""

from storerating.infrastructure.persistence.sqlalchemy.models.base import Base

# Stores and ratings reference users.id, so both live in one metadata
IdentityBase = Base

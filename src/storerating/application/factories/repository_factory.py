"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from storerating.application.ports import DirectoryReadPort
from storerating.domain.rating import RatingRepository
from storerating.domain.store import StoreRepository
from storerating_identity.domain.user import UserRepository
from storerating_identity.repositories import UserCredentialRepository


class RepositoryFactory(Protocol):
    """Protocol for creating request-scoped repositories."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is `Any` so the application layer does not depend on a
        specific database implementation. Routers use it for commit.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def credential_repository(self) -> UserCredentialRepository:
        """Get user credential repository."""
        ...

    def store_repository(self) -> StoreRepository:
        """Get store repository."""
        ...

    def rating_repository(self) -> RatingRepository:
        """Get rating repository."""
        ...

    def directory_read_port(self) -> DirectoryReadPort:
        """Get directory read port."""
        ...

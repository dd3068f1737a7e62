"""Abstract repository for the Store aggregate."""

from abc import ABC, abstractmethod

from storerating.domain.store.aggregates import Store


class StoreRepository(ABC):
    """Repository interface for stores."""

    @abstractmethod
    async def find_by_id(self, store_id: int) -> Store | None:
        """Find a store by its ID."""

    @abstractmethod
    async def exists_by_email(self, email: str, exclude_id: int | None = None) -> bool:
        """Check whether a store other than ``exclude_id`` uses the email."""

    @abstractmethod
    async def save(self, store: Store) -> Store:
        """Insert or update a store, returning it with its persisted ID."""

    @abstractmethod
    async def delete(self, store_id: int) -> bool:
        """Delete a store and its ratings. Returns True if deleted."""

    @abstractmethod
    async def count(self) -> int:
        """Count all stores."""

"""Abstract repository for ratings and their aggregates."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from decimal import Decimal

from storerating.domain.rating.entities import Rater, Rating


class RatingRepository(ABC):
    """Repository interface for ratings.

    Averages are computed by the database and returned unrounded; a store
    or owner without ratings averages to 0.
    """

    @abstractmethod
    async def upsert(self, user_id: int, store_id: int, value: int) -> Rating:
        """Insert the rating or overwrite the existing one for the pair."""

    @abstractmethod
    async def find_by_user_and_store(
        self,
        user_id: int,
        store_id: int,
    ) -> Rating | None:
        """Find a user's rating of a store."""

    @abstractmethod
    async def list_for_store(self, store_id: int) -> list[tuple[Rating, Rater]]:
        """All ratings of a store with their raters, in insertion order."""

    @abstractmethod
    async def average_for_store(self, store_id: int) -> Decimal:
        """Mean rating of a store."""

    @abstractmethod
    async def average_for_owner(self, owner_id: int) -> Decimal:
        """Mean over every rating of every store the owner owns."""

    @abstractmethod
    async def averages_for_owners(
        self,
        owner_ids: Iterable[int],
    ) -> dict[int, Decimal]:
        """Owner averages for many owners in one query."""

    @abstractmethod
    async def count(self) -> int:
        """Count all ratings."""

"""Average rating of one store."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.domain.rating import RatingRepository


class StoreAverageQuery:
    """Mean rating of a store, 0 when it has no ratings.

    An unknown store id is not an error; it simply has no ratings.
    """

    def __init__(self, rating_repository: RatingRepository):
        self._ratings = rating_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> StoreAverageQuery:
        return cls(rating_repository=factory.rating_repository())

    async def execute(self, store_id: int) -> Decimal:
        return await self._ratings.average_for_store(store_id)

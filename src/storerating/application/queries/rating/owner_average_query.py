"""Aggregate rating across every store a Store Owner owns."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.domain.rating import RatingRepository


class OwnerAverageQuery:
    """Mean of all ratings of all of an owner's stores, not a mean of means."""

    def __init__(self, rating_repository: RatingRepository):
        self._ratings = rating_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> OwnerAverageQuery:
        return cls(rating_repository=factory.rating_repository())

    async def execute(self, owner_id: int) -> Decimal:
        return await self._ratings.average_for_owner(owner_id)

"""A user's own rating of a store."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.domain.rating import RatingRepository


class UserStoreRatingQuery:
    def __init__(self, rating_repository: RatingRepository):
        self._ratings = rating_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UserStoreRatingQuery:
        return cls(rating_repository=factory.rating_repository())

    async def execute(self, user_id: int, store_id: int) -> int | None:
        rating = await self._ratings.find_by_user_and_store(user_id, store_id)
        return rating.value if rating else None

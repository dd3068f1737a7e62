"""Every rating of a store together with its rater."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storerating.application.dtos import RaterDTO, StoreRatingDTO

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.domain.rating import RatingRepository


class StoreRatingsQuery:
    """Ratings of one store in insertion order."""

    def __init__(self, rating_repository: RatingRepository):
        self._ratings = rating_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> StoreRatingsQuery:
        return cls(rating_repository=factory.rating_repository())

    async def execute(self, store_id: int) -> list[StoreRatingDTO]:
        rows = await self._ratings.list_for_store(store_id)
        return [
            StoreRatingDTO(
                id=rating.id,
                rating=rating.value,
                user_id=rating.user_id,
                store_id=rating.store_id,
                created_at=rating.created_at,
                updated_at=rating.updated_at,
                user=RaterDTO(id=rater.id, name=rater.name, email=rater.email),
            )
            for rating, rater in rows
        ]

"""Submit or overwrite a rating."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storerating.domain.rating import Rating, validate_rating_value
from storerating.domain.store import StoreNotFoundError

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.domain.rating import RatingRepository
    from storerating.domain.store import StoreRepository


class SubmitRatingCommand:
    """Record a Normal User's rating of a store.

    A second submission for the same (user, store) pair overwrites the
    first in place; there is never more than one row per pair.
    """

    def __init__(
        self,
        store_repository: StoreRepository,
        rating_repository: RatingRepository,
    ):
        self._stores = store_repository
        self._ratings = rating_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SubmitRatingCommand:
        return cls(
            store_repository=factory.store_repository(),
            rating_repository=factory.rating_repository(),
        )

    async def execute(self, user_id: int, store_id: int, value: int) -> Rating:
        validate_rating_value(value)

        if await self._stores.find_by_id(store_id) is None:
            raise StoreNotFoundError(store_id)

        return await self._ratings.upsert(user_id, store_id, value)

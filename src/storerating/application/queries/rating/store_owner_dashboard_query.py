"""Ratings dashboard for one store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storerating.application.dtos import StoreDashboardDTO
from storerating.application.queries.rating.store_ratings_query import (
    StoreRatingsQuery,
)
from storerating.domain.shared import ForbiddenError

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.domain.rating import RatingRepository
    from storerating.domain.store import StoreRepository
    from storerating_identity.application.context import Identity

logger = logging.getLogger(__name__)


class StoreOwnerDashboardQuery:
    """Ratings and average of a store, for its owner or an administrator.

    A missing store and a store owned by someone else are both refused
    with the same ForbiddenError, so callers cannot probe store ids.
    """

    def __init__(
        self,
        store_repository: StoreRepository,
        rating_repository: RatingRepository,
    ):
        self._stores = store_repository
        self._ratings = rating_repository
        self._store_ratings = StoreRatingsQuery(rating_repository)

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> StoreOwnerDashboardQuery:
        return cls(
            store_repository=factory.store_repository(),
            rating_repository=factory.rating_repository(),
        )

    async def execute(self, store_id: int, caller: Identity) -> StoreDashboardDTO:
        store = await self._stores.find_by_id(store_id)
        if store is None or (
            not caller.is_admin and not store.is_owned_by(caller.user_id)
        ):
            logger.warning(
                "Dashboard for store %s refused to user %s",
                store_id,
                caller.user_id,
            )
            raise ForbiddenError("Unauthorized")

        return StoreDashboardDTO(
            store_id=store_id,
            ratings=await self._store_ratings.execute(store_id),
            average=await self._ratings.average_for_store(store_id),
        )

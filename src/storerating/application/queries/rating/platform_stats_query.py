"""Platform-wide counts for the admin dashboard."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storerating.application.dtos import PlatformStatsDTO

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.domain.rating import RatingRepository
    from storerating.domain.store import StoreRepository
    from storerating_identity.domain.user import UserRepository


class PlatformStatsQuery:
    def __init__(
        self,
        user_repository: UserRepository,
        store_repository: StoreRepository,
        rating_repository: RatingRepository,
    ):
        self._users = user_repository
        self._stores = store_repository
        self._ratings = rating_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> PlatformStatsQuery:
        return cls(
            user_repository=factory.user_repository(),
            store_repository=factory.store_repository(),
            rating_repository=factory.rating_repository(),
        )

    async def execute(self) -> PlatformStatsDTO:
        # One AsyncSession cannot run statements concurrently
        return PlatformStatsDTO(
            users_count=await self._users.count(),
            stores_count=await self._stores.count(),
            ratings_count=await self._ratings.count(),
        )

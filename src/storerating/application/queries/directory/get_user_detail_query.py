"""Admin view of a single user."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from storerating.application.dtos import UserDetailDTO
from storerating.application.queries.rating.owner_average_query import (
    OwnerAverageQuery,
)
from storerating_identity.domain.user import UserNotFoundError, UserRole

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.application.ports import DirectoryReadPort
    from storerating.domain.rating import RatingRepository


class GetUserDetailQuery:
    """Return a user's projection, with ``store_rating`` for Store Owners."""

    def __init__(
        self,
        directory_read_port: DirectoryReadPort,
        rating_repository: RatingRepository,
    ):
        self._directory = directory_read_port
        self._owner_average = OwnerAverageQuery(rating_repository)

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserDetailQuery:
        return cls(
            directory_read_port=factory.directory_read_port(),
            rating_repository=factory.rating_repository(),
        )

    async def execute(self, user_id: int) -> UserDetailDTO:
        user = await self._directory.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if user.role != UserRole.STORE_OWNER:
            return user

        store_rating = await self._owner_average.execute(user.id)
        return replace(user, store_rating=store_rating)

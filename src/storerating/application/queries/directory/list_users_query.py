"""List users for the admin directory."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from storerating.application.dtos import (
    USER_SORT_FIELDS,
    SortSpec,
    UserFilter,
    UserListItemDTO,
)
from storerating_identity.domain.user import UserRole

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.application.ports import DirectoryReadPort
    from storerating.domain.rating import RatingRepository


class ListUsersQuery:
    """Filtered, sorted users; Store Owners carry their aggregate rating.

    Owner averages come from a single grouped query over every owner on
    the page.
    """

    def __init__(
        self,
        directory_read_port: DirectoryReadPort,
        rating_repository: RatingRepository,
    ):
        self._directory = directory_read_port
        self._ratings = rating_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListUsersQuery:
        return cls(
            directory_read_port=factory.directory_read_port(),
            rating_repository=factory.rating_repository(),
        )

    async def execute(
        self,
        user_filter: UserFilter | None = None,
        order_by: str | None = None,
        order: str | None = None,
    ) -> list[UserListItemDTO]:
        users = await self._directory.list_users(
            user_filter=user_filter or UserFilter(),
            sort=SortSpec.parse(order_by, order, USER_SORT_FIELDS),
        )

        owner_ids = [u.id for u in users if u.role == UserRole.STORE_OWNER]
        if not owner_ids:
            return users

        averages = await self._ratings.averages_for_owners(owner_ids)
        return [
            replace(u, average_rating=averages[u.id])
            if u.role == UserRole.STORE_OWNER
            else u
            for u in users
        ]

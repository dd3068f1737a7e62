"""Directory read port: filtered, sorted listings of users and stores."""

from __future__ import annotations

from typing import Protocol

from storerating.application.dtos import (
    SortSpec,
    StoreFilter,
    StoreListItemDTO,
    UserDetailDTO,
    UserFilter,
    UserListItemDTO,
)


class DirectoryReadPort(Protocol):
    """Listing-style read interface over users and stores."""

    async def list_users(
        self,
        *,
        user_filter: UserFilter,
        sort: SortSpec,
    ) -> list[UserListItemDTO]:
        """Users matching the filter, without owner averages."""
        ...

    async def get_user(self, user_id: int) -> UserDetailDTO | None:
        """Projection of one user, without the owner aggregate."""
        ...

    async def list_stores(
        self,
        *,
        store_filter: StoreFilter,
        sort: SortSpec,
        caller_id: int | None = None,
    ) -> list[StoreListItemDTO]:
        """Stores with their average rating and, for a caller, their own rating."""
        ...

    async def get_store(
        self,
        store_id: int,
        caller_id: int | None = None,
    ) -> StoreListItemDTO | None:
        """A single store enriched the same way as the listing."""
        ...

    async def get_store_for_owner(self, owner_id: int) -> StoreListItemDTO | None:
        """The store owned by a user (lowest id when several)."""
        ...

"""List stores with their aggregate ratings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storerating.application.dtos import (
    ADMIN_STORE_SORT_FIELDS,
    STORE_SORT_FIELDS,
    SortSpec,
    StoreFilter,
    StoreListItemDTO,
)

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.application.ports import DirectoryReadPort


class ListStoresQuery:
    """Filtered, sorted stores.

    The public listing sorts by id, name, address or averageRating; the
    admin listing additionally by email.
    """

    def __init__(self, directory_read_port: DirectoryReadPort):
        self._directory = directory_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListStoresQuery:
        return cls(directory_read_port=factory.directory_read_port())

    async def execute(
        self,
        store_filter: StoreFilter | None = None,
        order_by: str | None = None,
        order: str | None = None,
        caller_id: int | None = None,
        admin_view: bool = False,
    ) -> list[StoreListItemDTO]:
        allowed = ADMIN_STORE_SORT_FIELDS if admin_view else STORE_SORT_FIELDS
        return await self._directory.list_stores(
            store_filter=store_filter or StoreFilter(),
            sort=SortSpec.parse(order_by, order, allowed),
            caller_id=caller_id,
        )

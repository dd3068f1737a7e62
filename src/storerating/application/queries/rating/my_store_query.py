"""The store owned by the calling Store Owner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storerating.application.dtos import StoreListItemDTO
from storerating.domain.shared import EntityNotFoundError, ErrorCode

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.application.ports import DirectoryReadPort


class MyStoreQuery:
    def __init__(self, directory_read_port: DirectoryReadPort):
        self._directory = directory_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> MyStoreQuery:
        return cls(directory_read_port=factory.directory_read_port())

    async def execute(self, owner_id: int) -> StoreListItemDTO:
        store = await self._directory.get_store_for_owner(owner_id)
        if store is None:
            raise EntityNotFoundError(
                "No store found for this owner",
                code=ErrorCode.STORE_NOT_FOUND,
                details={"owner_id": owner_id},
            )
        return store

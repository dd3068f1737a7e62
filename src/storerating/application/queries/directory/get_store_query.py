"""Fetch a single store with its aggregate rating."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storerating.application.dtos import StoreListItemDTO
from storerating.domain.store import StoreNotFoundError

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.application.ports import DirectoryReadPort


class GetStoreQuery:
    def __init__(self, directory_read_port: DirectoryReadPort):
        self._directory = directory_read_port

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetStoreQuery:
        return cls(directory_read_port=factory.directory_read_port())

    async def execute(
        self,
        store_id: int,
        caller_id: int | None = None,
    ) -> StoreListItemDTO:
        store = await self._directory.get_store(store_id, caller_id=caller_id)
        if store is None:
            raise StoreNotFoundError(store_id)
        return store

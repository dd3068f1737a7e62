"""Delete a store together with its ratings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storerating.domain.store import StoreNotFoundError

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.domain.store import StoreRepository


class DeleteStoreCommand:
    def __init__(self, store_repository: StoreRepository):
        self._stores = store_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteStoreCommand:
        return cls(store_repository=factory.store_repository())

    async def execute(self, store_id: int) -> None:
        if not await self._stores.delete(store_id):
            raise StoreNotFoundError(store_id)

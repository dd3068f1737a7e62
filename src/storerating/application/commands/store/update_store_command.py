"""Partially update a store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storerating.application.commands.store.owner_validation import (
    ensure_store_owner,
)
from storerating.domain.store import (
    Store,
    StoreEmailAlreadyExistsError,
    StoreNotFoundError,
)

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.domain.store import StoreRepository
    from storerating_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UpdateStoreCommand:
    """Apply a patch to a store; a new owner is validated as on creation."""

    def __init__(
        self,
        store_repository: StoreRepository,
        user_repository: UserRepository,
    ):
        self._stores = store_repository
        self._users = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateStoreCommand:
        return cls(
            store_repository=factory.store_repository(),
            user_repository=factory.user_repository(),
        )

    async def execute(
        self,
        store_id: int,
        name: str | None = None,
        email: str | None = None,
        address: str | None = None,
        owner_id: int | None = None,
        clear_owner: bool = False,
    ) -> Store:
        store = await self._stores.find_by_id(store_id)
        if store is None:
            raise StoreNotFoundError(store_id)

        if owner_id is not None and not clear_owner:
            await ensure_store_owner(self._users, owner_id)

        if email is not None and await self._stores.exists_by_email(
            email,
            exclude_id=store_id,
        ):
            raise StoreEmailAlreadyExistsError(email)

        store.update(
            name=name,
            email=email,
            address=address,
            owner_id=owner_id,
            clear_owner=clear_owner,
        )
        updated = await self._stores.save(store)
        logger.info("Updated store %s", store_id)
        return updated

"""Create a store, optionally together with a new Store Owner account."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from storerating.application.commands.store.owner_validation import (
    ensure_store_owner,
)
from storerating.domain.shared import ValidationError
from storerating.domain.store import Store, StoreEmailAlreadyExistsError
from storerating_identity.application.commands import CreateUserCommand
from storerating_identity.domain.user import UserRole

if TYPE_CHECKING:
    from storerating.application.factories import RepositoryFactory
    from storerating.domain.store import StoreRepository
    from storerating_identity.domain.user import UserRepository
    from storerating_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)

MISSING_OWNER_MESSAGE = (
    "Please provide either ownerId or all new owner details "
    "(name, email, password, address)."
)
OWNER_EMAIL_TAKEN_MESSAGE = "A user with this email already exists."


@dataclass(frozen=True)
class NewOwnerDetails:
    """Details for a Store Owner account created alongside its store."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    address: str | None = None

    def is_complete(self) -> bool:
        return all((self.name, self.email, self.password, self.address))


class CreateStoreCommand:
    """Create a store owned by an existing or a newly created Store Owner.

    The owner account and the store are written in the caller's
    transaction, so a failure leaves neither behind.
    """

    def __init__(
        self,
        store_repository: StoreRepository,
        user_repository: UserRepository,
        create_user_command: CreateUserCommand,
    ):
        self._stores = store_repository
        self._users = user_repository
        self._create_user = create_user_command

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
    ) -> CreateStoreCommand:
        return cls(
            store_repository=factory.store_repository(),
            user_repository=factory.user_repository(),
            create_user_command=CreateUserCommand(
                user_repository=factory.user_repository(),
                credential_repository=factory.credential_repository(),
                password_service=password_service,
            ),
        )

    async def execute(
        self,
        name: str,
        email: str,
        address: str | None = None,
        owner_id: int | None = None,
        new_owner: NewOwnerDetails | None = None,
    ) -> Store:
        if owner_id is not None:
            await ensure_store_owner(self._users, owner_id)
        elif new_owner is None or not new_owner.is_complete():
            raise ValidationError(MISSING_OWNER_MESSAGE)

        if await self._stores.exists_by_email(email):
            raise StoreEmailAlreadyExistsError(email)

        if owner_id is None:
            owner = await self._create_user.execute(
                name=new_owner.name,
                email=new_owner.email,
                password=new_owner.password,
                address=new_owner.address,
                role=UserRole.STORE_OWNER,
                conflict_message=OWNER_EMAIL_TAKEN_MESSAGE,
            )
            owner_id = owner.id
            logger.info("Created store owner %s for new store", owner_id)

        store = await self._stores.save(
            Store.create(name=name, email=email, address=address, owner_id=owner_id),
        )
        logger.info("Created store %s owned by %s", store.id, owner_id)
        return store

"""Unit tests for the store commands."""

from unittest.mock import AsyncMock

import pytest

from storerating.application.commands.store import (
    CreateStoreCommand,
    DeleteStoreCommand,
    NewOwnerDetails,
    UpdateStoreCommand,
)
from storerating.application.commands.store.create_store_command import (
    MISSING_OWNER_MESSAGE,
    OWNER_EMAIL_TAKEN_MESSAGE,
)
from storerating.domain.shared import ErrorCode, ValidationError
from storerating.domain.store import (
    InvalidStoreOwnerError,
    Store,
    StoreEmailAlreadyExistsError,
    StoreNotFoundError,
)
from storerating_identity.domain.user import EmailAlreadyExistsError

STORE_NAME = "Corner Grocery and Fresh Produce"


def _saved(store: Store) -> Store:
    return Store.reconstitute(
        id=store.id or 100,
        name=store.name,
        email=store.email,
        address=store.address,
        owner_id=store.owner_id,
        created_at=store.created_at,
        updated_at=store.updated_at,
    )


class TestCreateStoreCommand:
    @pytest.fixture(autouse=True)
    def _command(self, store_owner):
        self.store_repo = AsyncMock()
        self.store_repo.exists_by_email.return_value = False
        self.store_repo.save.side_effect = _saved
        self.user_repo = AsyncMock()
        self.user_repo.find_by_id.return_value = store_owner
        self.create_user = AsyncMock()
        self.create_user.execute.return_value = store_owner
        self.command = CreateStoreCommand(
            store_repository=self.store_repo,
            user_repository=self.user_repo,
            create_user_command=self.create_user,
        )

    @pytest.mark.asyncio
    async def test_with_existing_owner(self, store_owner):
        store = await self.command.execute(
            STORE_NAME,
            "Corner@Example.com",
            "1 Main Street",
            owner_id=store_owner.id,
        )

        assert store.id == 100
        assert store.owner_id == store_owner.id
        assert store.email == "corner@example.com"
        self.create_user.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejects_owner_with_other_role(self, normal_user):
        self.user_repo.find_by_id.return_value = normal_user

        with pytest.raises(InvalidStoreOwnerError) as exc_info:
            await self.command.execute(STORE_NAME, "c@example.com", owner_id=normal_user.id)

        assert exc_info.value.message == "ownerId must reference a valid Store Owner"
        assert exc_info.value.code == ErrorCode.INVALID_OWNER
        self.store_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejects_unknown_owner(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(InvalidStoreOwnerError):
            await self.command.execute(STORE_NAME, "c@example.com", owner_id=999)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "new_owner",
        [None, NewOwnerDetails(name="Olivia Store Owner", email="o@example.com")],
    )
    async def test_requires_owner_id_or_complete_details(self, new_owner):
        with pytest.raises(ValidationError) as exc_info:
            await self.command.execute(STORE_NAME, "c@example.com", new_owner=new_owner)

        assert exc_info.value.message == MISSING_OWNER_MESSAGE

    @pytest.mark.asyncio
    async def test_creates_new_owner_with_store_owner_role(self, store_owner):
        details = NewOwnerDetails(
            name="Olivia Store Owner",
            email="olivia@example.com",
            password="secret1",
            address="7 Harbour Road",
        )

        store = await self.command.execute(STORE_NAME, "c@example.com", new_owner=details)

        assert store.owner_id == store_owner.id
        kwargs = self.create_user.execute.await_args.kwargs
        assert kwargs["role"].value == "Store Owner"
        assert kwargs["conflict_message"] == OWNER_EMAIL_TAKEN_MESSAGE

    @pytest.mark.asyncio
    async def test_new_owner_email_taken(self):
        self.create_user.execute.side_effect = EmailAlreadyExistsError(
            "olivia@example.com",
            OWNER_EMAIL_TAKEN_MESSAGE,
        )
        details = NewOwnerDetails("Olivia", "olivia@example.com", "secret1", "Road")

        with pytest.raises(EmailAlreadyExistsError) as exc_info:
            await self.command.execute(STORE_NAME, "c@example.com", new_owner=details)

        assert exc_info.value.message == "A user with this email already exists."
        self.store_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_email_conflict(self, store_owner):
        self.store_repo.exists_by_email.return_value = True

        with pytest.raises(StoreEmailAlreadyExistsError):
            await self.command.execute(STORE_NAME, "c@example.com", owner_id=store_owner.id)


class TestUpdateStoreCommand:
    @pytest.fixture(autouse=True)
    def _command(self, owned_store, store_owner):
        self.store_repo = AsyncMock()
        self.store_repo.find_by_id.return_value = owned_store
        self.store_repo.exists_by_email.return_value = False
        self.store_repo.save.side_effect = _saved
        self.user_repo = AsyncMock()
        self.user_repo.find_by_id.return_value = store_owner
        self.command = UpdateStoreCommand(
            store_repository=self.store_repo,
            user_repository=self.user_repo,
        )

    @pytest.mark.asyncio
    async def test_partial_update(self):
        store = await self.command.execute(100, address="2 Side Street")

        assert store.address == "2 Side Street"
        assert store.name == STORE_NAME
        self.user_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_store(self):
        self.store_repo.find_by_id.return_value = None

        with pytest.raises(StoreNotFoundError):
            await self.command.execute(5, name="Riverside Books and Coffee House")

    @pytest.mark.asyncio
    async def test_new_owner_must_be_store_owner(self, normal_user):
        self.user_repo.find_by_id.return_value = normal_user

        with pytest.raises(InvalidStoreOwnerError):
            await self.command.execute(100, owner_id=normal_user.id)

        self.store_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_clear_owner_skips_owner_lookup(self):
        store = await self.command.execute(100, clear_owner=True)

        assert store.owner_id is None
        self.user_repo.find_by_id.assert_not_called()
        self.store_repo.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_email_conflict_excludes_the_store_itself(self):
        self.store_repo.exists_by_email.return_value = True

        with pytest.raises(StoreEmailAlreadyExistsError):
            await self.command.execute(100, email="taken@example.com")

        self.store_repo.exists_by_email.assert_awaited_once_with(
            "taken@example.com",
            exclude_id=100,
        )


class TestDeleteStoreCommand:
    @pytest.mark.asyncio
    async def test_deletes_existing_store(self):
        store_repo = AsyncMock()
        store_repo.delete.return_value = True

        await DeleteStoreCommand(store_repo).execute(100)

        store_repo.delete.assert_awaited_once_with(100)

    @pytest.mark.asyncio
    async def test_missing_store(self):
        store_repo = AsyncMock()
        store_repo.delete.return_value = False

        with pytest.raises(StoreNotFoundError) as exc_info:
            await DeleteStoreCommand(store_repo).execute(100)

        assert exc_info.value.code == ErrorCode.STORE_NOT_FOUND

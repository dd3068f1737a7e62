"""Unit tests for the directory queries."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from storerating.application.dtos import (
    SortSpec,
    StoreFilter,
    UserDetailDTO,
    UserFilter,
    UserListItemDTO,
)
from storerating.application.queries.directory import (
    GetStoreQuery,
    GetUserDetailQuery,
    ListStoresQuery,
    ListUsersQuery,
)
from storerating.domain.store import StoreNotFoundError
from storerating_identity.domain.user import UserNotFoundError, UserRole


def _user(user_id: int, role: UserRole) -> UserListItemDTO:
    return UserListItemDTO(
        id=user_id,
        name=f"Directory User Number {user_id}",
        email=f"user{user_id}@example.com",
        address=None,
        role=role,
    )


class TestListUsersQuery:
    @pytest.fixture(autouse=True)
    def _query(self):
        self.directory = AsyncMock()
        self.ratings = AsyncMock()
        self.query = ListUsersQuery(
            directory_read_port=self.directory,
            rating_repository=self.ratings,
        )

    @pytest.mark.asyncio
    async def test_owner_averages_fetched_in_one_batch(self):
        self.directory.list_users.return_value = [
            _user(1, UserRole.SYSTEM_ADMINISTRATOR),
            _user(2, UserRole.STORE_OWNER),
            _user(3, UserRole.NORMAL_USER),
            _user(4, UserRole.STORE_OWNER),
        ]
        self.ratings.averages_for_owners.return_value = {
            2: Decimal("4.5"),
            4: Decimal("0"),
        }

        users = await self.query.execute()

        self.ratings.averages_for_owners.assert_awaited_once_with([2, 4])
        assert [u.average_rating for u in users] == [
            None,
            Decimal("4.5"),
            None,
            Decimal("0"),
        ]

    @pytest.mark.asyncio
    async def test_no_owners_skips_average_lookup(self):
        self.directory.list_users.return_value = [_user(3, UserRole.NORMAL_USER)]

        await self.query.execute()

        self.ratings.averages_for_owners.assert_not_called()

    @pytest.mark.asyncio
    async def test_passes_parsed_criteria(self):
        self.directory.list_users.return_value = []

        await self.query.execute(UserFilter(name=" alex "), "email", "desc")

        kwargs = self.directory.list_users.await_args.kwargs
        assert kwargs["user_filter"].name == "alex"
        assert kwargs["sort"] == SortSpec.parse("email", "DESC", frozenset({"email"}))


class TestGetUserDetailQuery:
    @pytest.fixture(autouse=True)
    def _query(self):
        self.directory = AsyncMock()
        self.ratings = AsyncMock()
        self.query = GetUserDetailQuery(
            directory_read_port=self.directory,
            rating_repository=self.ratings,
        )

    @pytest.mark.asyncio
    async def test_store_owner_gets_store_rating(self):
        self.directory.get_user.return_value = UserDetailDTO(
            id=2,
            name="Olivia Store Owner",
            email="olivia@example.com",
            address=None,
            role=UserRole.STORE_OWNER,
        )
        self.ratings.average_for_owner.return_value = Decimal("3.5")

        user = await self.query.execute(2)

        assert user.store_rating == Decimal("3.5")
        self.ratings.average_for_owner.assert_awaited_once_with(2)

    @pytest.mark.asyncio
    async def test_other_roles_have_no_store_rating(self):
        self.directory.get_user.return_value = UserDetailDTO(
            id=3,
            name="Alexandra Normal Customer",
            email="alex@example.com",
            address=None,
            role=UserRole.NORMAL_USER,
        )

        user = await self.query.execute(3)

        assert user.store_rating is None
        self.ratings.average_for_owner.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        self.directory.get_user.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.query.execute(42)


class TestStoreQueries:
    @pytest.mark.asyncio
    async def test_public_listing_ignores_email_sort(self):
        directory = AsyncMock()
        directory.list_stores.return_value = []

        await ListStoresQuery(directory).execute(order_by="email", caller_id=7)

        kwargs = directory.list_stores.await_args.kwargs
        assert kwargs["sort"].field == "name"
        assert kwargs["caller_id"] == 7
        assert kwargs["store_filter"] == StoreFilter()

    @pytest.mark.asyncio
    async def test_admin_listing_sorts_by_email(self):
        directory = AsyncMock()
        directory.list_stores.return_value = []

        await ListStoresQuery(directory).execute(
            order_by="email",
            order="DESC",
            admin_view=True,
        )

        sort = directory.list_stores.await_args.kwargs["sort"]
        assert sort.field == "email"
        assert sort.descending

    @pytest.mark.asyncio
    async def test_get_store_not_found(self):
        directory = AsyncMock()
        directory.get_store.return_value = None

        with pytest.raises(StoreNotFoundError):
            await GetStoreQuery(directory).execute(9, caller_id=None)

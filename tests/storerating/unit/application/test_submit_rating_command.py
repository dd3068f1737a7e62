"""Unit tests for SubmitRatingCommand."""

from unittest.mock import AsyncMock

import pytest

from storerating.application.commands.rating import SubmitRatingCommand
from storerating.domain.rating import Rating
from storerating.domain.shared import ErrorCode, ValidationError
from storerating.domain.store import StoreNotFoundError


class TestSubmitRatingCommand:
    @pytest.fixture(autouse=True)
    def _command(self, owned_store):
        self.store_repo = AsyncMock()
        self.store_repo.find_by_id.return_value = owned_store
        self.rating_repo = AsyncMock()
        self.rating_repo.upsert.side_effect = lambda user_id, store_id, value: Rating(
            user_id=user_id,
            store_id=store_id,
            value=value,
            id=1,
        )
        self.command = SubmitRatingCommand(
            store_repository=self.store_repo,
            rating_repository=self.rating_repo,
        )

    @pytest.mark.asyncio
    async def test_upserts_rating(self):
        rating = await self.command.execute(user_id=20, store_id=100, value=4)

        assert rating.value == 4
        self.rating_repo.upsert.assert_awaited_once_with(20, 100, 4)

    @pytest.mark.asyncio
    async def test_unknown_store(self):
        self.store_repo.find_by_id.return_value = None

        with pytest.raises(StoreNotFoundError):
            await self.command.execute(user_id=20, store_id=999, value=4)

        self.rating_repo.upsert.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_value_checked_before_lookup(self):
        with pytest.raises(ValidationError) as exc_info:
            await self.command.execute(user_id=20, store_id=100, value=6)

        assert exc_info.value.code == ErrorCode.INVALID_RATING
        self.store_repo.find_by_id.assert_not_called()

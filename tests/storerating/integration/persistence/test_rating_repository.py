"""Integration tests for RatingRepositorySQLAlchemy."""

from decimal import Decimal

import pytest

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_upsert_keeps_one_row_per_user_and_store(repository_factory, directory):
    ratings = repository_factory.rating_repository()

    first = await ratings.upsert(directory.alex.id, directory.corner.id, 2)
    second = await ratings.upsert(directory.alex.id, directory.corner.id, 5)

    assert second.id == first.id
    assert second.value == 5
    assert await ratings.count() == 1
    assert await ratings.average_for_store(directory.corner.id) == Decimal(5)

    stored = await ratings.find_by_user_and_store(directory.alex.id, directory.corner.id)
    assert stored.value == 5


@pytest.mark.asyncio
async def test_unrated_store_average_is_zero(repository_factory, directory):
    ratings = repository_factory.rating_repository()

    assert await ratings.average_for_store(directory.corner.id) == Decimal(0)
    assert await ratings.average_for_store(9999) == Decimal(0)


@pytest.mark.asyncio
async def test_store_average_is_unrounded(repository_factory, directory):
    ratings = repository_factory.rating_repository()
    await ratings.upsert(directory.alex.id, directory.corner.id, 4)
    await ratings.upsert(directory.ben.id, directory.corner.id, 5)

    assert await ratings.average_for_store(directory.corner.id) == Decimal("4.5")


@pytest.mark.asyncio
async def test_owner_average_pools_all_ratings(repository_factory, directory):
    ratings = repository_factory.rating_repository()
    await ratings.upsert(directory.alex.id, directory.corner.id, 5)
    await ratings.upsert(directory.ben.id, directory.corner.id, 5)
    await ratings.upsert(directory.alex.id, directory.riverside.id, 2)

    # (5 + 5 + 2) / 3, not the mean of the store means (5 + 2) / 2
    assert await ratings.average_for_owner(directory.owner.id) == Decimal(4)
    assert await ratings.average_for_owner(directory.other_owner.id) == Decimal(0)


@pytest.mark.asyncio
async def test_averages_for_owners_includes_owners_without_ratings(
    repository_factory,
    directory,
):
    ratings = repository_factory.rating_repository()
    await ratings.upsert(directory.alex.id, directory.corner.id, 3)

    averages = await ratings.averages_for_owners(
        [directory.owner.id, directory.other_owner.id],
    )

    assert averages == {
        directory.owner.id: Decimal(3),
        directory.other_owner.id: Decimal(0),
    }
    assert await ratings.averages_for_owners([]) == {}


@pytest.mark.asyncio
async def test_list_for_store_carries_raters(repository_factory, directory):
    ratings = repository_factory.rating_repository()
    await ratings.upsert(directory.ben.id, directory.corner.id, 1)
    await ratings.upsert(directory.alex.id, directory.corner.id, 4)
    await ratings.upsert(directory.alex.id, directory.riverside.id, 2)

    rows = await ratings.list_for_store(directory.corner.id)

    assert [(rating.value, rater.email) for rating, rater in rows] == [
        (1, "ben@example.com"),
        (4, "alex@example.com"),
    ]

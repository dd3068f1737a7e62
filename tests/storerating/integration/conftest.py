"""
Pytest configuration for storerating integration tests.

Re-exports the shared SQLite database fixtures and seeds a small
directory of users, stores and ratings.
"""

from dataclasses import dataclass

import pytest_asyncio

from storerating.domain.store import Store
from storerating.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from storerating_identity.domain.user import User, UserRole
from tests.shared.fixtures.database import (
    async_engine,
    database_url,
    db_session,
    session_maker,
)
from tests.shared.fixtures.factories import TestStoreFactory, TestUserFactory

__all__ = [
    "Directory",
    "async_engine",
    "database_url",
    "db_session",
    "directory",
    "repository_factory",
    "session_maker",
]


@dataclass
class Directory:
    """Seeded users and stores; no ratings yet."""

    admin: User
    owner: User
    other_owner: User
    alex: User
    ben: User
    corner: Store
    riverside: Store


@pytest_asyncio.fixture
async def repository_factory(db_session) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(db_session)


@pytest_asyncio.fixture
async def directory(repository_factory) -> Directory:
    users = repository_factory.user_repository()
    stores = repository_factory.store_repository()

    admin = await users.save(
        User.create(
            TestUserFactory.ADMIN_NAME,
            TestUserFactory.ADMIN_EMAIL,
            role=UserRole.SYSTEM_ADMINISTRATOR,
        ),
    )
    owner = await users.save(
        User.create(
            TestUserFactory.OWNER_NAME,
            TestUserFactory.OWNER_EMAIL,
            address="7 Harbour Road",
            role=UserRole.STORE_OWNER,
        ),
    )
    other_owner = await users.save(
        User.create(
            "Oscar Second Owner",
            "oscar@example.com",
            role=UserRole.STORE_OWNER,
        ),
    )
    alex = await users.save(
        User.create(
            TestUserFactory.NORMAL_NAME,
            TestUserFactory.NORMAL_EMAIL,
            address="12 Market Street",
        ),
    )
    ben = await users.save(
        User.create(TestUserFactory.OTHER_NAME, TestUserFactory.OTHER_EMAIL),
    )

    corner = await stores.save(
        Store.create(
            TestStoreFactory.NAME,
            TestStoreFactory.EMAIL,
            TestStoreFactory.ADDRESS,
            owner_id=owner.id,
        ),
    )
    riverside = await stores.save(
        Store.create(
            TestStoreFactory.OTHER_NAME,
            TestStoreFactory.OTHER_EMAIL,
            "42 River Lane",
            owner_id=owner.id,
        ),
    )
    return Directory(admin, owner, other_owner, alex, ben, corner, riverside)

"""
Pytest configuration for storerating tests.

Fixtures for stores, ratings and caller identities.
"""

import pytest

from storerating.domain.shared.time import utc_now
from storerating.domain.store import Store
from storerating_identity.application.context import Identity
from storerating_identity.domain.user import User, UserRole

OWNER_ID = 10
OTHER_OWNER_ID = 11
ADMIN_ID = 1
NORMAL_USER_ID = 20


@pytest.fixture
def owned_store() -> Store:
    now = utc_now()
    return Store.reconstitute(
        id=100,
        name="Corner Grocery and Fresh Produce",
        email="corner@example.com",
        address="1 Main Street",
        owner_id=OWNER_ID,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def store_owner() -> User:
    now = utc_now()
    return User.reconstitute(
        id=OWNER_ID,
        name="Olivia Store Owner",
        email="olivia@example.com",
        address="7 Harbour Road",
        role=UserRole.STORE_OWNER,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def normal_user() -> User:
    now = utc_now()
    return User.reconstitute(
        id=NORMAL_USER_ID,
        name="Alexandra Normal Customer",
        email="alex@example.com",
        address=None,
        role=UserRole.NORMAL_USER,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def admin_identity() -> Identity:
    return Identity(ADMIN_ID, UserRole.SYSTEM_ADMINISTRATOR)


@pytest.fixture
def owner_identity() -> Identity:
    return Identity(OWNER_ID, UserRole.STORE_OWNER)


@pytest.fixture
def other_owner_identity() -> Identity:
    return Identity(OTHER_OWNER_ID, UserRole.STORE_OWNER)

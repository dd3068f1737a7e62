"""
Pytest configuration for storerating_identity tests.

Fixtures for users, tokens and passwords.
"""

import pytest

from storerating.domain.shared.time import utc_now
from storerating_identity.domain.user import User, UserRole
from storerating_identity.services import JWTService, PasswordHashingService

TEST_SECRET = "unit-test-secret"


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=TEST_SECRET)


@pytest.fixture
def password_service() -> PasswordHashingService:
    # Lowest bcrypt work factor keeps the suite fast
    return PasswordHashingService(rounds=4)


@pytest.fixture
def normal_user() -> User:
    return User.reconstitute(
        id=1,
        name="Alexandra Normal Customer",
        email="alex@example.com",
        address="12 Market Street",
        role=UserRole.NORMAL_USER,
        created_at=utc_now(),
        updated_at=utc_now(),
    )

"""
Fixtures for API tests.

Each test gets a FastAPI app bound to its own SQLite file. Users with
elevated roles are written straight through CreateUserCommand (there is
no public endpoint for them) and then log in over HTTP like any client.
"""

import asyncio
from dataclasses import dataclass

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from storerating.infrastructure.persistence.sqlalchemy.init_db import create_tables
from storerating.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from storerating.presentation.api.app import create_app
from storerating.presentation.api.config import get_api_settings
from storerating.presentation.api.dependencies import get_db_session
from storerating_config.settings import Settings
from storerating_identity.application.commands import CreateUserCommand
from storerating_identity.domain.user import UserRole
from storerating_identity.services import PasswordHashingService
from tests.shared.fixtures.factories import (
    VALID_PASSWORD,
    TestStoreFactory,
    TestUserFactory,
)


@dataclass(frozen=True)
class Actor:
    """A logged-in API client identity."""

    id: int
    email: str
    token: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture
def api_settings(database_url) -> Settings:
    return Settings(
        jwt_secret_key=SecretStr("api-test-secret"),
        bcrypt_rounds=4,
        database_dsn=database_url,
        api_debug=True,
    )


@pytest.fixture
def client(api_settings, async_engine, session_maker):
    """TestClient with the session and settings dependencies overridden."""
    asyncio.run(create_tables(async_engine))

    app = create_app(settings=api_settings)

    async def override_db_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings

    yield TestClient(app)

    app.dependency_overrides.clear()


def login(client: TestClient, email: str, password: str = VALID_PASSWORD) -> str:
    response = client.post(
        "/api/auth/login",
        json={"email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]


@pytest.fixture
def make_user(client, session_maker):
    """Create a user of any role in the database and log them in."""

    async def _create(name: str, email: str, role: UserRole) -> int:
        async with session_maker() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            command = CreateUserCommand(
                user_repository=factory.user_repository(),
                credential_repository=factory.credential_repository(),
                password_service=PasswordHashingService(rounds=4),
            )
            user = await command.execute(
                name=name,
                email=email,
                password=VALID_PASSWORD,
                role=role,
            )
            await session.commit()
            return user.id

    def _make(name: str, email: str, role: UserRole) -> Actor:
        user_id = asyncio.run(_create(name, email, role))
        return Actor(id=user_id, email=email, token=login(client, email))

    return _make


@pytest.fixture
def admin(make_user) -> Actor:
    return make_user(
        TestUserFactory.ADMIN_NAME,
        TestUserFactory.ADMIN_EMAIL,
        UserRole.SYSTEM_ADMINISTRATOR,
    )


@pytest.fixture
def owner(make_user) -> Actor:
    return make_user(
        TestUserFactory.OWNER_NAME,
        TestUserFactory.OWNER_EMAIL,
        UserRole.STORE_OWNER,
    )


@pytest.fixture
def signup(client):
    """Register a Normal User through the API and log them in."""

    def _signup(**overrides) -> Actor:
        payload = TestUserFactory.signup_payload(**overrides)
        response = client.post("/api/auth/signup", json=payload)
        assert response.status_code == 201, response.text
        return Actor(
            id=response.json()["userId"],
            email=payload["email"],
            token=login(client, payload["email"], payload["password"]),
        )

    return _signup


@pytest.fixture
def normal_user(signup) -> Actor:
    return signup()


@pytest.fixture
def store(client, admin, owner) -> dict:
    """A store owned by ``owner``, created by ``admin``."""
    response = client.post(
        "/api/stores",
        json=TestStoreFactory.payload(owner_id=owner.id),
        headers=admin.headers,
    )
    assert response.status_code == 201, response.text
    return response.json()

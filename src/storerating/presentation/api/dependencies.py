"""FastAPI dependency injection for the Store Rating API.

Provides dependencies for:
- Database sessions
- Role-gated identities (from the bearer token)
- Repository factory for request-scoped repositories
- Service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator, Callable

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from storerating.infrastructure.persistence.sqlalchemy import init_db
from storerating.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from storerating.presentation.api.config import get_api_settings
from storerating_config.settings import Settings, get_settings
from storerating_identity.application.context import Identity
from storerating_identity.application.services import (
    ADMIN_ONLY,
    NORMAL_USER_ONLY,
    OWNER_OR_ADMIN,
    STORE_OWNER_ONLY,
    AccessGate,
    AuthenticationService,
)
from storerating_identity.domain.user import UserRole
from storerating_identity.services import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens; a missing header is not an error here
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite"):
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    Routers commit explicitly; anything left uncommitted is rolled back
    when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables() -> None:
    """Create missing tables on the shared engine."""
    await init_db.create_tables(get_engine())


async def drop_tables() -> None:
    """Drop all tables on the shared engine (USE WITH CAUTION!)."""
    await init_db.drop_tables(get_engine())


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Annotated[Settings, Depends(get_api_settings)],
) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(
    settings: Annotated[Settings, Depends(get_api_settings)],
) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


def get_access_gate(
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
) -> AccessGate:
    return AccessGate(jwt_service)


def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    """Request-scoped repository factory bound to the request's session."""
    return SQLAlchemyRepositoryFactory(session)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
PasswordService = Annotated[PasswordHashingService, Depends(get_password_service)]
Gate = Annotated[AccessGate, Depends(get_access_gate)]


def get_authentication_service(
    factory: RepoFactory,
    password_service: PasswordService,
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=factory.user_repository(),
        credential_repository=factory.credential_repository(),
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Identities
# -----------------------------------------------------------------------------

BearerCredentials = Annotated[
    HTTPAuthorizationCredentials | None,
    Depends(security),
]


def _token(credentials: HTTPAuthorizationCredentials | None) -> str | None:
    return credentials.credentials if credentials else None


def get_current_identity(credentials: BearerCredentials, gate: Gate) -> Identity:
    """
    Resolve the caller from the bearer token, whatever their role.

    Raises
    ------
    UnauthenticatedError
        If the token is missing or invalid (mapped to 401)
    """
    return gate.authenticate(_token(credentials))


def get_optional_identity(
    credentials: BearerCredentials,
    gate: Gate,
) -> Identity | None:
    """Resolve the caller if a valid token is present, else None."""
    return gate.identify_optional(_token(credentials))


def require_roles(roles: frozenset[UserRole]) -> Callable[..., Identity]:
    """
    Build a dependency admitting only callers whose role is in ``roles``.

    Missing or invalid tokens map to 401, a valid token with the wrong role
    to 403. Dependencies resolve before the request body is validated.
    """

    def dependency(credentials: BearerCredentials, gate: Gate) -> Identity:
        return gate.authorize(_token(credentials), roles)

    return dependency


AuthenticatedIdentity = Annotated[Identity, Depends(get_current_identity)]
OptionalIdentity = Annotated[Identity | None, Depends(get_optional_identity)]
AdminIdentity = Annotated[Identity, Depends(require_roles(ADMIN_ONLY))]
NormalUserIdentity = Annotated[Identity, Depends(require_roles(NORMAL_USER_ONLY))]
StoreOwnerIdentity = Annotated[Identity, Depends(require_roles(STORE_OWNER_ONLY))]
OwnerOrAdminIdentity = Annotated[Identity, Depends(require_roles(OWNER_OR_ADMIN))]

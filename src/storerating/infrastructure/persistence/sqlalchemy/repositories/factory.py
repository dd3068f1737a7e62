"""SQLAlchemy repository factory for request-scoped repositories."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from storerating.infrastructure.persistence.sqlalchemy.adapters.directory import (
    SqlAlchemyDirectoryReadAdapter,
)
from storerating.infrastructure.persistence.sqlalchemy.repositories.rating_repository import (  # NOQA: E501
    RatingRepositorySQLAlchemy,
)
from storerating.infrastructure.persistence.sqlalchemy.repositories.store_repository import (  # NOQA: E501
    StoreRepositorySQLAlchemy,
)
from storerating_identity.infrastructure.persistence.sqlalchemy import (
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._credential_repo: UserCredentialRepositorySQLAlchemy | None = None
        self._store_repo: StoreRepositorySQLAlchemy | None = None
        self._rating_repo: RatingRepositorySQLAlchemy | None = None
        self._directory_adapter: SqlAlchemyDirectoryReadAdapter | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def credential_repository(self) -> UserCredentialRepositorySQLAlchemy:
        if self._credential_repo is None:
            self._credential_repo = UserCredentialRepositorySQLAlchemy(self._session)
        return self._credential_repo

    def store_repository(self) -> StoreRepositorySQLAlchemy:
        if self._store_repo is None:
            self._store_repo = StoreRepositorySQLAlchemy(self._session)
        return self._store_repo

    def rating_repository(self) -> RatingRepositorySQLAlchemy:
        if self._rating_repo is None:
            self._rating_repo = RatingRepositorySQLAlchemy(self._session)
        return self._rating_repo

    def directory_read_port(self) -> SqlAlchemyDirectoryReadAdapter:
        if self._directory_adapter is None:
            self._directory_adapter = SqlAlchemyDirectoryReadAdapter(self._session)
        return self._directory_adapter

"""SQLAlchemy implementation of StoreRepository."""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storerating.domain.shared.time import ensure_tz_aware
from storerating.domain.store import (
    Store,
    StoreEmailAlreadyExistsError,
    StoreRepository,
)
from storerating.infrastructure.persistence.sqlalchemy.models import (
    RatingModel,
    StoreModel,
)

logger = logging.getLogger(__name__)


class StoreRepositorySQLAlchemy(StoreRepository):
    """SQLAlchemy implementation of the StoreRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, store_id: int) -> Store | None:
        model = await self._find_model_by_id(store_id)
        return self._map_to_domain(model) if model else None

    async def exists_by_email(self, email: str, exclude_id: int | None = None) -> bool:
        stmt = select(func.count()).where(StoreModel.email == email.strip().lower())
        if exclude_id is not None:
            stmt = stmt.where(StoreModel.id != exclude_id)
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def save(self, store: Store) -> Store:
        existing = (
            await self._find_model_by_id(store.id) if store.id is not None else None
        )

        try:
            if existing:
                self._update_model(existing, store)
                model = existing
                await self._session.flush()
                logger.debug("Updated store: %s", store.id)
            else:
                model = self._map_to_model(store)
                self._session.add(model)
                await self._session.flush()
                logger.info("Created store: %s (email: %s)", model.id, store.email)
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise StoreEmailAlreadyExistsError(store.email) from e
            raise

        return self._map_to_domain(model)

    async def delete(self, store_id: int) -> bool:
        model = await self._find_model_by_id(store_id)
        if model is None:
            return False

        # SQLite only honours ON DELETE CASCADE with foreign_keys enabled
        await self._session.execute(
            delete(RatingModel).where(RatingModel.store_id == store_id),
        )
        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted store: %s", store_id)
        return True

    async def count(self) -> int:
        stmt = select(func.count()).select_from(StoreModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _find_model_by_id(self, store_id: int) -> StoreModel | None:
        stmt = select(StoreModel).where(StoreModel.id == store_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: StoreModel) -> Store:
        return Store.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            address=model.address,
            owner_id=model.owner_id,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, store: Store) -> StoreModel:
        return StoreModel(
            name=store.name,
            email=store.email,
            address=store.address,
            owner_id=store.owner_id,
            created_at=store.created_at,
            updated_at=store.updated_at,
        )

    def _update_model(self, model: StoreModel, store: Store) -> None:
        model.name = store.name
        model.email = store.email
        model.address = store.address
        model.owner_id = store.owner_id

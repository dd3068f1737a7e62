"""SQLAlchemy implementation of RatingRepository."""

import logging
from collections.abc import Iterable
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from storerating.domain.rating import Rater, Rating, RatingRepository
from storerating.domain.shared.time import ensure_tz_aware, utc_now
from storerating.infrastructure.persistence.sqlalchemy.decimal_utils import to_decimal
from storerating.infrastructure.persistence.sqlalchemy.models import (
    RatingModel,
    StoreModel,
)
from storerating_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class RatingRepositorySQLAlchemy(RatingRepository):
    """SQLAlchemy implementation of the RatingRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _insert(self):
        dialect = self._session.get_bind().dialect.name
        try:
            return _UPSERT_DIALECTS[dialect]
        except KeyError:
            msg = f"Rating upsert is not supported on dialect '{dialect}'"
            raise NotImplementedError(msg) from None

    async def upsert(self, user_id: int, store_id: int, value: int) -> Rating:
        now = utc_now()
        insert = self._insert()
        stmt = insert(RatingModel).values(
            user_id=user_id,
            store_id=store_id,
            rating=value,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[RatingModel.user_id, RatingModel.store_id],
            set_={
                "rating": stmt.excluded.rating,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(
            RatingModel.id,
            RatingModel.rating,
            RatingModel.created_at,
            RatingModel.updated_at,
        )

        result = await self._session.execute(stmt)
        row = result.one()
        logger.info(
            "Saved rating %s for store %s by user %s",
            row.rating,
            store_id,
            user_id,
        )
        return Rating.reconstitute(
            id=row.id,
            user_id=user_id,
            store_id=store_id,
            value=row.rating,
            created_at=ensure_tz_aware(row.created_at),
            updated_at=ensure_tz_aware(row.updated_at),
        )

    async def find_by_user_and_store(
        self,
        user_id: int,
        store_id: int,
    ) -> Rating | None:
        stmt = select(RatingModel).where(
            RatingModel.user_id == user_id,
            RatingModel.store_id == store_id,
        )
        result = await self._session.execute(
            stmt.execution_options(populate_existing=True),
        )
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def list_for_store(self, store_id: int) -> list[tuple[Rating, Rater]]:
        stmt = (
            select(RatingModel, UserModel.id, UserModel.name, UserModel.email)
            .join(UserModel, UserModel.id == RatingModel.user_id)
            .where(RatingModel.store_id == store_id)
            .order_by(RatingModel.id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return [
            (
                self._map_to_domain(model),
                Rater(id=rater_id, name=name, email=email),
            )
            for model, rater_id, name, email in result.all()
        ]

    async def average_for_store(self, store_id: int) -> Decimal:
        stmt = select(func.coalesce(func.avg(RatingModel.rating), 0)).where(
            RatingModel.store_id == store_id,
        )
        result = await self._session.execute(stmt)
        return to_decimal(result.scalar_one())

    async def average_for_owner(self, owner_id: int) -> Decimal:
        stmt = (
            select(func.coalesce(func.avg(RatingModel.rating), 0))
            .select_from(RatingModel)
            .join(StoreModel, StoreModel.id == RatingModel.store_id)
            .where(StoreModel.owner_id == owner_id)
        )
        result = await self._session.execute(stmt)
        return to_decimal(result.scalar_one())

    async def averages_for_owners(
        self,
        owner_ids: Iterable[int],
    ) -> dict[int, Decimal]:
        ids = sorted(set(owner_ids))
        if not ids:
            return {}

        stmt = (
            select(StoreModel.owner_id, func.avg(RatingModel.rating))
            .select_from(StoreModel)
            .join(RatingModel, RatingModel.store_id == StoreModel.id)
            .where(StoreModel.owner_id.in_(ids))
            .group_by(StoreModel.owner_id)
        )
        result = await self._session.execute(stmt)
        averages = {owner_id: to_decimal(avg) for owner_id, avg in result.all()}
        return {owner_id: averages.get(owner_id, Decimal(0)) for owner_id in ids}

    async def count(self) -> int:
        stmt = select(func.count()).select_from(RatingModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    def _map_to_domain(self, model: RatingModel) -> Rating:
        return Rating.reconstitute(
            id=model.id,
            user_id=model.user_id,
            store_id=model.store_id,
            value=model.rating,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

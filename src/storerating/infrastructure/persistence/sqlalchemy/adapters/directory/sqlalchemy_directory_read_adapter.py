"""SQLAlchemy implementation of DirectoryReadPort.

Store averages and the caller's own rating are correlated scalar
subqueries of the listing statement, so a page of stores is one query.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, Select, func, null, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from storerating.application.dtos import (
    OwnerSummaryDTO,
    SortSpec,
    StoreFilter,
    StoreListItemDTO,
    UserDetailDTO,
    UserFilter,
    UserListItemDTO,
)
from storerating.application.ports import DirectoryReadPort
from storerating.domain.shared.time import ensure_tz_aware
from storerating.infrastructure.persistence.sqlalchemy.decimal_utils import to_decimal
from storerating.infrastructure.persistence.sqlalchemy.models import (
    RatingModel,
    StoreModel,
)
from storerating_identity.domain.user import UserRole
from storerating_identity.infrastructure.persistence.sqlalchemy.models import UserModel

Owner = aliased(UserModel, name="owner")

_USER_SORT_COLUMNS: dict[str, Any] = {
    "id": UserModel.id,
    "name": UserModel.name,
    "email": UserModel.email,
    "address": UserModel.address,
    "role": UserModel.role,
}

_STORE_SORT_COLUMNS: dict[str, Any] = {
    "id": StoreModel.id,
    "name": StoreModel.name,
    "email": StoreModel.email,
    "address": StoreModel.address,
}


def _contains(column: Any, value: str) -> ColumnElement[bool]:
    """Case-insensitive substring match with LIKE wildcards escaped."""
    return func.lower(column).contains(value.lower(), autoescape=True)


def _ordered(expression: Any, sort: SortSpec) -> Any:
    return expression.desc() if sort.descending else expression.asc()


class SqlAlchemyDirectoryReadAdapter(DirectoryReadPort):
    """SQLAlchemy directory read adapter."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_users(
        self,
        *,
        user_filter: UserFilter,
        sort: SortSpec,
    ) -> list[UserListItemDTO]:
        stmt = select(UserModel)
        if user_filter.name:
            stmt = stmt.where(_contains(UserModel.name, user_filter.name))
        if user_filter.email:
            stmt = stmt.where(_contains(UserModel.email, user_filter.email))
        if user_filter.address:
            stmt = stmt.where(_contains(UserModel.address, user_filter.address))
        if user_filter.role:
            stmt = stmt.where(_contains(UserModel.role, user_filter.role))

        column = _USER_SORT_COLUMNS.get(sort.field, UserModel.name)
        stmt = stmt.order_by(_ordered(column, sort), UserModel.id.asc())

        result = await self._session.execute(stmt)
        return [
            UserListItemDTO(
                id=model.id,
                name=model.name,
                email=model.email,
                address=model.address,
                role=UserRole(model.role),
            )
            for model in result.scalars().all()
        ]

    async def get_user(self, user_id: int) -> UserDetailDTO | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return UserDetailDTO(
            id=model.id,
            name=model.name,
            email=model.email,
            address=model.address,
            role=UserRole(model.role),
        )

    async def list_stores(
        self,
        *,
        store_filter: StoreFilter,
        sort: SortSpec,
        caller_id: int | None = None,
    ) -> list[StoreListItemDTO]:
        stmt = self._store_select(caller_id)
        if store_filter.name:
            stmt = stmt.where(_contains(StoreModel.name, store_filter.name))
        if store_filter.email:
            stmt = stmt.where(_contains(StoreModel.email, store_filter.email))
        if store_filter.address:
            stmt = stmt.where(_contains(StoreModel.address, store_filter.address))

        if sort.field == "averageRating":
            column = stmt.selected_columns.average_rating
        else:
            column = _STORE_SORT_COLUMNS.get(sort.field, StoreModel.name)
        stmt = stmt.order_by(_ordered(column, sort), StoreModel.id.asc())

        result = await self._session.execute(stmt)
        return [self._to_store_dto(row) for row in result.all()]

    async def get_store(
        self,
        store_id: int,
        caller_id: int | None = None,
    ) -> StoreListItemDTO | None:
        stmt = self._store_select(caller_id).where(StoreModel.id == store_id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        return self._to_store_dto(row) if row else None

    async def get_store_for_owner(self, owner_id: int) -> StoreListItemDTO | None:
        stmt = (
            self._store_select(None)
            .where(StoreModel.owner_id == owner_id)
            .order_by(StoreModel.id.asc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        return self._to_store_dto(row) if row else None

    def _store_select(self, caller_id: int | None) -> Select:
        average = (
            select(func.coalesce(func.avg(RatingModel.rating), 0))
            .where(RatingModel.store_id == StoreModel.id)
            .correlate(StoreModel)
            .scalar_subquery()
        )
        if caller_id is not None:
            user_rating = (
                select(RatingModel.rating)
                .where(
                    RatingModel.store_id == StoreModel.id,
                    RatingModel.user_id == caller_id,
                )
                .correlate(StoreModel)
                .limit(1)
                .scalar_subquery()
            )
        else:
            user_rating = null()

        return select(
            StoreModel.id,
            StoreModel.name,
            StoreModel.email,
            StoreModel.address,
            StoreModel.owner_id,
            StoreModel.created_at,
            StoreModel.updated_at,
            average.label("average_rating"),
            user_rating.label("user_rating"),
            Owner.id.label("owner_user_id"),
            Owner.name.label("owner_name"),
            Owner.email.label("owner_email"),
        ).outerjoin(Owner, Owner.id == StoreModel.owner_id)

    @staticmethod
    def _to_store_dto(row: Any) -> StoreListItemDTO:
        owner = (
            OwnerSummaryDTO(
                id=row.owner_user_id,
                name=row.owner_name,
                email=row.owner_email,
            )
            if row.owner_user_id is not None
            else None
        )
        return StoreListItemDTO(
            id=row.id,
            name=row.name,
            email=row.email,
            address=row.address,
            owner_id=row.owner_id,
            average_rating=to_decimal(row.average_rating),
            created_at=ensure_tz_aware(row.created_at),
            updated_at=ensure_tz_aware(row.updated_at),
            owner=owner,
            user_rating=row.user_rating,
        )

"""SQLAlchemy model for Store aggregate."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storerating.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class StoreModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting stores.

    ``owner_id`` references a user with the Store Owner role; the role
    itself is checked by the application layer.
    """

    __tablename__ = "stores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(60), nullable=False, index=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    address: Mapped[str | None] = mapped_column(String(400), nullable=True)
    owner_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<StoreModel(id={self.id}, name={self.name}, owner_id={self.owner_id})>"

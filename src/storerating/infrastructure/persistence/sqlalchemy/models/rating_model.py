"""SQLAlchemy model for ratings."""

from sqlalchemy import ForeignKey, Integer, SmallInteger, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from storerating.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class RatingModel(Base, TimestampMixin):
    """One user's rating of one store.

    At most one row exists per (user_id, store_id); submissions upsert on
    that pair.
    """

    __tablename__ = "ratings"
    __table_args__ = (
        UniqueConstraint("user_id", "store_id", name="uq_ratings_user_store"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    rating: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    store_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("stores.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<RatingModel(id={self.id}, user_id={self.user_id}, "
            f"store_id={self.store_id}, rating={self.rating})>"
        )

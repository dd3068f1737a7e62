"""Rating entity: one user's score for one store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storerating.domain.shared.exceptions import ErrorCode, ValidationError
from storerating.domain.shared.time import utc_now

MIN_RATING = 1
MAX_RATING = 5


def validate_rating_value(value: int) -> int:
    """Return ``value`` if it is an integer in [1, 5].

    Raises
    ------
    ValidationError
        With code INVALID_RATING otherwise
    """
    if (
        isinstance(value, bool)
        or not isinstance(value, int)
        or not MIN_RATING <= value <= MAX_RATING
    ):
        msg = f"Rating must be an integer between {MIN_RATING} and {MAX_RATING}"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_RATING,
            details={"rating": value},
        )
    return value


@dataclass(frozen=True)
class Rater:
    """Public identity of the user behind a rating."""

    id: int
    name: str
    email: str


class Rating:
    """A score in [1, 5]; unique per (user_id, store_id)."""

    def __init__(
        self,
        user_id: int,
        store_id: int,
        value: int,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id
        self._user_id = user_id
        self._store_id = store_id
        self._value = validate_rating_value(value)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def user_id(self) -> int:
        return self._user_id

    @property
    def store_id(self) -> int:
        return self._store_id

    @property
    def value(self) -> int:
        return self._value

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def reconstitute(
        cls,
        id: int,
        user_id: int,
        store_id: int,
        value: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> Rating:
        return cls(
            id=id,
            user_id=user_id,
            store_id=store_id,
            value=value,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __repr__(self) -> str:
        return (
            f"Rating(id={self._id}, user_id={self._user_id}, "
            f"store_id={self._store_id}, value={self._value})"
        )

"""Rating schemas for request/response models."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, field_validator

from storerating.domain.rating import MAX_RATING, MIN_RATING
from storerating.presentation.api.schemas.common import (
    CamelModel,
    check_positive_id,
)

RATING_MESSAGE = f"Rating must be an integer between {MIN_RATING} and {MAX_RATING}"


class SubmitRatingRequest(CamelModel):
    """Create or replace the caller's rating of a store."""

    store_id: int
    rating: int

    model_config = ConfigDict(
        json_schema_extra={"example": {"storeId": 1, "rating": 4}},
    )

    @field_validator("store_id", mode="before")
    @classmethod
    def _validate_store_id(cls, v: Any) -> int:
        return check_positive_id(v, "storeId must be a valid integer")

    @field_validator("rating", mode="before")
    @classmethod
    def _validate_rating(cls, v: Any) -> int:
        if isinstance(v, str) and v.strip().isdigit():
            v = int(v)
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(RATING_MESSAGE)
        if not MIN_RATING <= v <= MAX_RATING:
            raise ValueError(RATING_MESSAGE)
        return v


class RatingResponse(CamelModel):
    id: int
    rating: int
    user_id: int
    store_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RatingSavedResponse(CamelModel):
    message: str
    rating: RatingResponse


class UserRatingResponse(CamelModel):
    """The caller's own rating of a store, null when not rated."""

    rating: int | None


class AverageResponse(CamelModel):
    """Mean rating of a store, 0 when unrated."""

    average: float

"""Rating domain: scores users give stores."""

from storerating.domain.rating.entities import (
    MAX_RATING,
    MIN_RATING,
    Rater,
    Rating,
    validate_rating_value,
)
from storerating.domain.rating.repositories import RatingRepository

__all__ = [
    "MAX_RATING",
    "MIN_RATING",
    "Rater",
    "Rating",
    "RatingRepository",
    "validate_rating_value",
]

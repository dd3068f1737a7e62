from storerating.domain.rating.entities.rating import (
    MAX_RATING,
    MIN_RATING,
    Rater,
    Rating,
    validate_rating_value,
)

__all__ = [
    "MAX_RATING",
    "MIN_RATING",
    "Rater",
    "Rating",
    "validate_rating_value",
]

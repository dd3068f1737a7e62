"""Store owner dashboard schemas."""

from storerating.presentation.api.schemas.common import CamelModel
from storerating.presentation.api.schemas.ratings import RatingResponse


class RaterResponse(CamelModel):
    id: int
    name: str
    email: str


class StoreRatingResponse(RatingResponse):
    """Rating row together with the user who submitted it."""

    user: RaterResponse


class StoreDashboardResponse(CamelModel):
    """All ratings of one store plus their mean."""

    ratings: list[StoreRatingResponse]
    average: float

"""Read models for ratings and dashboards."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class RaterDTO:
    id: int
    name: str
    email: str


@dataclass(frozen=True)
class StoreRatingDTO:
    """A rating of a store together with the user who gave it."""

    id: int
    rating: int
    user_id: int
    store_id: int
    created_at: datetime
    updated_at: datetime
    user: RaterDTO


@dataclass(frozen=True)
class StoreDashboardDTO:
    """Every rating of one store plus its average."""

    store_id: int
    ratings: list[StoreRatingDTO]
    average: Decimal


@dataclass(frozen=True)
class PlatformStatsDTO:
    users_count: int
    stores_count: int
    ratings_count: int

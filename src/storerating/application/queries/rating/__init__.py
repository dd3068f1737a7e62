"""Rating aggregation queries."""

from storerating.application.queries.rating.my_store_query import MyStoreQuery
from storerating.application.queries.rating.owner_average_query import (
    OwnerAverageQuery,
)
from storerating.application.queries.rating.platform_stats_query import (
    PlatformStatsQuery,
)
from storerating.application.queries.rating.store_average_query import (
    StoreAverageQuery,
)
from storerating.application.queries.rating.store_owner_dashboard_query import (
    StoreOwnerDashboardQuery,
)
from storerating.application.queries.rating.store_ratings_query import (
    StoreRatingsQuery,
)
from storerating.application.queries.rating.user_store_rating_query import (
    UserStoreRatingQuery,
)

__all__ = [
    "MyStoreQuery",
    "OwnerAverageQuery",
    "PlatformStatsQuery",
    "StoreAverageQuery",
    "StoreOwnerDashboardQuery",
    "StoreRatingsQuery",
    "UserStoreRatingQuery",
]

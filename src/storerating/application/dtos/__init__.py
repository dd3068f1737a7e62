from storerating.application.dtos.directory_criteria import (
    ADMIN_STORE_SORT_FIELDS,
    STORE_SORT_FIELDS,
    USER_SORT_FIELDS,
    SortDirection,
    SortSpec,
    StoreFilter,
    UserFilter,
)
from storerating.application.dtos.directory_dto import (
    OwnerSummaryDTO,
    StoreListItemDTO,
    UserDetailDTO,
    UserListItemDTO,
)
from storerating.application.dtos.rating_dto import (
    PlatformStatsDTO,
    RaterDTO,
    StoreDashboardDTO,
    StoreRatingDTO,
)

__all__ = [
    "ADMIN_STORE_SORT_FIELDS",
    "STORE_SORT_FIELDS",
    "USER_SORT_FIELDS",
    "OwnerSummaryDTO",
    "PlatformStatsDTO",
    "RaterDTO",
    "SortDirection",
    "SortSpec",
    "StoreDashboardDTO",
    "StoreFilter",
    "StoreListItemDTO",
    "StoreRatingDTO",
    "UserDetailDTO",
    "UserFilter",
    "UserListItemDTO",
]

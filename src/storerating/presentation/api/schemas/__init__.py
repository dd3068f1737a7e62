"""Pydantic schemas for API request/response models."""

from storerating.presentation.api.schemas.admin import (
    CreateUserRequest,
    PlatformStatsResponse,
    UserDetailResponse,
    UserListItemResponse,
)
from storerating.presentation.api.schemas.auth import (
    LoginRequest,
    SignupRequest,
    SignupResponse,
    TokenResponse,
    UpdatePasswordRequest,
    UserResponse,
)
from storerating.presentation.api.schemas.common import (
    CamelModel,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    ValidationErrorResponse,
)
from storerating.presentation.api.schemas.ratings import (
    AverageResponse,
    RatingResponse,
    RatingSavedResponse,
    SubmitRatingRequest,
    UserRatingResponse,
)
from storerating.presentation.api.schemas.store_owner import (
    RaterResponse,
    StoreDashboardResponse,
    StoreRatingResponse,
)
from storerating.presentation.api.schemas.stores import (
    CreateStoreRequest,
    NewOwnerRequest,
    OwnerSummaryResponse,
    StoreResponse,
    UpdateStoreRequest,
)

__all__ = [
    # Common
    "CamelModel",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "ValidationErrorResponse",
    # Auth
    "LoginRequest",
    "SignupRequest",
    "SignupResponse",
    "TokenResponse",
    "UpdatePasswordRequest",
    "UserResponse",
    # Admin
    "CreateUserRequest",
    "PlatformStatsResponse",
    "UserDetailResponse",
    "UserListItemResponse",
    # Stores
    "CreateStoreRequest",
    "NewOwnerRequest",
    "OwnerSummaryResponse",
    "StoreResponse",
    "UpdateStoreRequest",
    # Ratings
    "AverageResponse",
    "RatingResponse",
    "RatingSavedResponse",
    "SubmitRatingRequest",
    "UserRatingResponse",
    # Store owner
    "RaterResponse",
    "StoreDashboardResponse",
    "StoreRatingResponse",
]

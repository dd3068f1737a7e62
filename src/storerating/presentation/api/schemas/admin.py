"""Admin schemas for platform statistics and user management."""

from typing import Any

from pydantic import ConfigDict, field_validator

from storerating.presentation.api.schemas.auth import UserResponse
from storerating.presentation.api.schemas.common import (
    AddressField,
    CamelModel,
    EmailField,
    check_name_length,
)
from storerating_identity.domain.user import (
    PASSWORD_POLICY_MESSAGE,
    UserRole,
    satisfies_password_policy,
)

ADMIN_NAME_MIN = 10
ADMIN_NAME_MAX = 40


class PlatformStatsResponse(CamelModel):
    """Platform-wide counts for the admin dashboard."""

    users_count: int
    stores_count: int
    ratings_count: int


class CreateUserRequest(CamelModel):
    """Request schema for an administrator creating a user of any role."""

    name: str
    email: EmailField
    password: str
    address: AddressField = None
    role: UserRole

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Olivia Owner",
                "email": "olivia@example.com",
                "password": "Secret!123",
                "address": "7 Harbour Road",
                "role": "Store Owner",
            },
        },
    )

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, v: Any) -> str:
        return check_name_length(v, ADMIN_NAME_MIN, ADMIN_NAME_MAX)

    @field_validator("password", mode="before")
    @classmethod
    def _validate_password(cls, v: Any) -> str:
        if not isinstance(v, str) or not satisfies_password_policy(v):
            raise ValueError(PASSWORD_POLICY_MESSAGE)
        return v

    @field_validator("role", mode="before")
    @classmethod
    def _validate_role(cls, v: Any) -> UserRole:
        try:
            return UserRole(v)
        except ValueError as e:
            msg = "Invalid role"
            raise ValueError(msg) from e


class UserListItemResponse(UserResponse):
    """User row in the admin listing; owners carry their average rating."""

    average_rating: float | None = None


class UserDetailResponse(UserResponse):
    """Single user; owners carry the average across their stores."""

    store_rating: float | None = None

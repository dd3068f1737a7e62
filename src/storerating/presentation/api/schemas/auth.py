"""Authentication schemas for request/response models."""

from typing import Any

from pydantic import ConfigDict, Field, field_validator

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

SIGNUP_NAME_MIN = 20
SIGNUP_NAME_MAX = 60

NEW_PASSWORD_POLICY_MESSAGE = (
    "New password must be 8-16 chars and include at least one uppercase "
    "letter and one special character"
)


def _require_text(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValueError(message)
    return value


class SignupRequest(CamelModel):
    """Request schema for self-service registration (always a Normal User)."""

    name: str
    email: EmailField
    password: str
    address: AddressField = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Alexandra Normal Customer",
                "email": "alex@example.com",
                "password": "Secret!123",
                "address": "12 Market Street",
            },
        },
    )

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, v: Any) -> str:
        return check_name_length(v, SIGNUP_NAME_MIN, SIGNUP_NAME_MAX)

    @field_validator("password", mode="before")
    @classmethod
    def _validate_password(cls, v: Any) -> str:
        if not isinstance(v, str) or not satisfies_password_policy(v):
            raise ValueError(PASSWORD_POLICY_MESSAGE)
        return v


class SignupResponse(CamelModel):
    """Response schema for a successful signup."""

    message: str
    user_id: int


class LoginRequest(CamelModel):
    """Request schema for user login."""

    email: EmailField
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "alex@example.com", "password": "Secret!123"},
        },
    )

    @field_validator("password", mode="before")
    @classmethod
    def _validate_password(cls, v: Any) -> str:
        return _require_text(v, "Password is required")


class TokenResponse(CamelModel):
    """Bearer token issued on login."""

    token: str


class UpdatePasswordRequest(CamelModel):
    """Request schema for changing the caller's own password."""

    current_password: str
    new_password: str

    @field_validator("current_password", mode="before")
    @classmethod
    def _validate_current(cls, v: Any) -> str:
        return _require_text(v, "Current password is required")

    @field_validator("new_password", mode="before")
    @classmethod
    def _validate_new(cls, v: Any) -> str:
        if not isinstance(v, str) or not satisfies_password_policy(v):
            raise ValueError(NEW_PASSWORD_POLICY_MESSAGE)
        return v


class UserResponse(CamelModel):
    """Public projection of a user; the password hash is never exposed."""

    id: int
    name: str
    email: str
    address: str | None = None
    role: UserRole = Field(..., description="Role string as used on the wire")

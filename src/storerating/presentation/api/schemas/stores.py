"""Store schemas for request/response models."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, field_validator

from storerating.presentation.api.schemas.admin import ADMIN_NAME_MAX, ADMIN_NAME_MIN
from storerating.presentation.api.schemas.common import (
    AddressField,
    CamelModel,
    EmailField,
    OptionalEmailField,
    check_name_length,
    check_positive_id,
)

STORE_NAME_MIN = 20
STORE_NAME_MAX = 60
NEW_OWNER_PASSWORD_MIN = 6

OWNER_ID_MESSAGE = "ownerId must be a valid user id"


class NewOwnerRequest(CamelModel):
    """Inline details for a Store Owner created together with the store.

    Every field is optional here; the store creation workflow decides
    whether the set is complete.
    """

    name: str | None = None
    email: OptionalEmailField = None
    password: str | None = None
    address: AddressField = None

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, v: Any) -> str | None:
        if v is None:
            return None
        return check_name_length(v, ADMIN_NAME_MIN, ADMIN_NAME_MAX)

    @field_validator("password", mode="before")
    @classmethod
    def _validate_password(cls, v: Any) -> str | None:
        if v is None:
            return None
        if not isinstance(v, str) or len(v) < NEW_OWNER_PASSWORD_MIN:
            msg = f"owner.password must be at least {NEW_OWNER_PASSWORD_MIN} chars"
            raise ValueError(msg)
        return v


class CreateStoreRequest(CamelModel):
    """Request schema for creating a store.

    The owner is either an existing Store Owner (``ownerId``) or a new one
    described inline (``owner``).
    """

    name: str
    email: EmailField
    address: AddressField = None
    owner_id: int | None = None
    owner: NewOwnerRequest | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Corner Grocery and Fresh Produce",
                "email": "corner@example.com",
                "address": "1 Main Street",
                "ownerId": 3,
            },
        },
    )

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, v: Any) -> str:
        return check_name_length(v, STORE_NAME_MIN, STORE_NAME_MAX)

    @field_validator("owner_id", mode="before")
    @classmethod
    def _validate_owner_id(cls, v: Any) -> int | None:
        if v is None:
            return None
        return check_positive_id(v, OWNER_ID_MESSAGE)


class UpdateStoreRequest(CamelModel):
    """Partial update of a store; omitted fields stay unchanged."""

    name: str | None = None
    email: OptionalEmailField = None
    address: AddressField = None
    owner_id: int | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, v: Any) -> str | None:
        if v is None:
            return None
        return check_name_length(v, STORE_NAME_MIN, STORE_NAME_MAX)

    @field_validator("owner_id", mode="before")
    @classmethod
    def _validate_owner_id(cls, v: Any) -> int | None:
        if v is None:
            return None
        return check_positive_id(v, OWNER_ID_MESSAGE)


class OwnerSummaryResponse(CamelModel):
    id: int
    name: str
    email: str


class StoreResponse(CamelModel):
    """Store with its live average rating.

    ``userRating`` is present only when the caller identified themselves;
    it is null when they have not rated the store yet.
    """

    id: int
    name: str
    email: str
    address: str | None = None
    owner_id: int | None = None
    average_rating: float
    user_rating: int | None = None
    owner: OwnerSummaryResponse | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

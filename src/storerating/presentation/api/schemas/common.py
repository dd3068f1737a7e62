"""Common schemas shared across API endpoints."""

from typing import Annotated, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_ADDRESS_LENGTH = 400


class CamelModel(BaseModel):
    """Base schema serialized with camelCase field names.

    Requests accept both camelCase and snake_case keys.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _check_email(value: Any) -> str:
    if not isinstance(value, str):
        msg = "Invalid email"
        raise ValueError(msg)  # NOQA: TRY004
    try:
        return validate_email(value, check_deliverability=False).normalized.lower()
    except EmailNotValidError as e:
        msg = "Invalid email"
        raise ValueError(msg) from e


def _check_optional_email(value: Any) -> str | None:
    if value is None:
        return None
    return _check_email(value)


def _check_address(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or len(value) > MAX_ADDRESS_LENGTH:
        msg = f"Address must be at most {MAX_ADDRESS_LENGTH} characters"
        raise ValueError(msg)
    return value


def check_name_length(value: Any, min_length: int, max_length: int) -> str:
    """Validate a display name against an inclusive length range."""
    if not isinstance(value, str) or not min_length <= len(value) <= max_length:
        msg = f"Name must be {min_length}-{max_length} characters"
        raise ValueError(msg)
    return value


def check_positive_id(value: Any, message: str) -> int:
    """Accept integers (or digit strings) of at least 1."""
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(message)
    return value


# Valid, lower-cased email address reported as "Invalid email" otherwise
EmailField = Annotated[str, BeforeValidator(_check_email)]

OptionalEmailField = Annotated[str | None, BeforeValidator(_check_optional_email)]

# Optional postal address of at most 400 characters
AddressField = Annotated[str | None, BeforeValidator(_check_address)]


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"error": "Store not found", "code": "STORE_NOT_FOUND"},
        },
    )


class ValidationErrorItem(BaseModel):
    """One invalid request field."""

    msg: str
    path: str
    location: str


class ValidationErrorResponse(BaseModel):
    """Request validation failure listing every invalid field."""

    errors: list[ValidationErrorItem]
    code: str = "VALIDATION_ERROR"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "errors": [
                    {
                        "msg": "Name must be 20-60 characters",
                        "path": "name",
                        "location": "body",
                    },
                ],
                "code": "VALIDATION_ERROR",
            },
        },
    )


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")

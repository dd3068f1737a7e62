"""Store domain exceptions."""

from storerating.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class StoreNotFoundError(EntityNotFoundError):
    """Raised when a store cannot be found."""

    def __init__(self, store_id: int) -> None:
        self.store_id = store_id
        super().__init__(
            message="Store not found",
            code=ErrorCode.STORE_NOT_FOUND,
            details={"store_id": store_id},
        )


class StoreEmailAlreadyExistsError(ConflictError):
    """Raised when another store already uses the email."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            message="A store with this email already exists.",
            details={"email": email},
        )


class InvalidStoreOwnerError(ValidationError):
    """Raised when a store owner reference does not point at a Store Owner."""

    def __init__(self, owner_id: int | None = None, message: str | None = None) -> None:
        super().__init__(
            message=message or "ownerId must reference a valid Store Owner",
            code=ErrorCode.INVALID_OWNER,
            details={"owner_id": owner_id},
        )

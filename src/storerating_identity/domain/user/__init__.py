"""User domain manages user identity only.

This domain handles:
- User aggregate (identity: id, name, email, address, role)
- Role enumeration used by the access control gate
- Password policy shared by every password-setting path
"""

from storerating_identity.domain.user.aggregates import User
from storerating_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from storerating_identity.domain.user.repositories import UserRepository
from storerating_identity.domain.user.value_objects import (
    PASSWORD_POLICY_MESSAGE,
    Email,
    UserRole,
    satisfies_password_policy,
)

__all__ = [
    "PASSWORD_POLICY_MESSAGE",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "satisfies_password_policy",
]

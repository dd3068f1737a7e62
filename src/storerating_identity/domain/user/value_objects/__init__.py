"""Value objects for the user domain having identity concerns only."""

from storerating_identity.domain.user.value_objects.email import Email
from storerating_identity.domain.user.value_objects.password_policy import (
    PASSWORD_POLICY_MESSAGE,
    satisfies_password_policy,
)
from storerating_identity.domain.user.value_objects.user_role import UserRole

__all__ = [
    "Email",
    "PASSWORD_POLICY_MESSAGE",
    "UserRole",
    "satisfies_password_policy",
]

"""Identity schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from dataclasses import dataclass
from datetime import datetime

from storerating_identity.domain.user.value_objects import UserRole


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    role
        The role the token was issued for
    issued_at
        When the token was issued
    exp
        Expiration timestamp, None for tokens without an expiry claim
    """

    user_id: int
    role: UserRole
    issued_at: datetime | None = None
    exp: datetime | None = None

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        if self.exp is None:
            return False
        return datetime.now(tz=self.exp.tzinfo) > self.exp

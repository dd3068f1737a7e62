"""Abstract repository interface for user credentials.

This interface defines the contract for credential persistence.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserCredentialData:
    """Immutable credential data returned by repository."""

    user_id: int
    password_hash: str
    last_login_at: datetime | None = None


class UserCredentialRepository(ABC):
    """Abstract repository interface for user authentication credentials."""

    @abstractmethod
    async def save(self, user_id: int, password_hash: str) -> UserCredentialData:
        """
        Create or update credentials for a user.

        Parameters
        ----------
        user_id
            The user's unique identifier
        password_hash
            The bcrypt password hash

        Returns
        -------
        The saved credential data
        """

    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> UserCredentialData | None:
        """Find credentials by user ID."""

    @abstractmethod
    async def update_last_login(self, user_id: int) -> None:
        """Record a successful login."""

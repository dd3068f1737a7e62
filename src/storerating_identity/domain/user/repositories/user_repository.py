"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from storerating_identity.domain.user.aggregates.user import User
from storerating_identity.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save or update a user, returning it with its persisted ID."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""

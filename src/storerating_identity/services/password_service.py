"""Password hashing service using bcrypt.

Provides secure password hashing and verification plus the password
policy check applied wherever a user chooses a password.
"""

import bcrypt

from storerating_identity.domain.user.value_objects import (
    PASSWORD_POLICY_MESSAGE,
    satisfies_password_policy,
)
from storerating_identity.exceptions import WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> hashed = service.hash("Secret!Pass1")
    >>> service.verify("Secret!Pass1", hashed)
    True
    >>> service.verify("wrong_password", hashed)
    False
    """

    def __init__(self, rounds: int = 10):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations).
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Raises
        ------
        WeakPasswordError
            If the password is empty
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Returns
        -------
        True if password matches, False otherwise
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets the account password policy.

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not satisfies_password_policy(password):
            raise WeakPasswordError(PASSWORD_POLICY_MESSAGE)

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a password hash was produced with a different work factor."""
        try:
            # bcrypt format: $2b$XX$...
            parts = password_hash.split("$")
            if len(parts) >= 3:
                return int(parts[2]) != self._rounds
        except (ValueError, IndexError):
            pass
        return True

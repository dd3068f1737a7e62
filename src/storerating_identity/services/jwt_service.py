"""JWT token service.

Issues and verifies the signed identity tokens carried in the
``Authorization: Bearer`` header.
"""

from datetime import datetime, timedelta, timezone

import jwt

from storerating_identity.domain.user.value_objects import UserRole
from storerating_identity.exceptions import InvalidTokenError
from storerating_identity.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Tokens bind a user id and a role. They carry no expiry claim unless
    ``access_token_expire_hours`` is positive.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.issue(42, UserRole.NORMAL_USER)
    >>> service.verify(token).user_id
    42
    """

    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = 0,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until a token expires; 0 disables the expiry claim
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = (
            timedelta(hours=access_token_expire_hours)
            if access_token_expire_hours > 0
            else None
        )

    def issue(self, user_id: int, role: UserRole) -> str:
        """Create a signed token for the given identity.

        Parameters
        ----------
        user_id
            The user's unique identifier
        role
            The user's role at issue time

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        payload: dict = {
            "id": user_id,
            "role": role.value,
            "iat": now,
        }
        if self._expire is not None:
            payload["exp"] = now + self._expire

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify(self, token: str | None) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded identity

        Raises
        ------
        InvalidTokenError
            If token is missing, invalid, expired, or malformed
        """
        if not token:
            msg = "No token provided"
            raise InvalidTokenError(msg)

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
            )
        except jwt.ExpiredSignatureError as e:
            msg = "Token has expired"
            raise InvalidTokenError(msg) from e
        except jwt.InvalidTokenError as e:
            msg = f"Invalid token: {e}"
            raise InvalidTokenError(msg) from e

        try:
            user_id = int(payload["id"])
            role = UserRole(payload["role"])
        except (KeyError, TypeError, ValueError) as e:
            msg = f"Malformed token payload: {e}"
            raise InvalidTokenError(msg) from e

        issued_at = payload.get("iat")
        exp = payload.get("exp")
        return TokenPayload(
            user_id=user_id,
            role=role,
            issued_at=(
                datetime.fromtimestamp(issued_at, tz=timezone.utc)
                if issued_at is not None
                else None
            ),
            exp=datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None,
        )

    def try_verify(self, token: str | None) -> TokenPayload | None:
        """Decode a token if it is present and valid, otherwise return None."""
        if not token:
            return None
        try:
            return self.verify(token)
        except InvalidTokenError:
            return None

"""Role-gated access control.

Every protected operation names the explicit set of roles it admits. The
gate turns a bearer token into an ``Identity`` or refuses the request.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storerating.domain.shared import ForbiddenError, UnauthenticatedError
from storerating_identity.application.context import Identity
from storerating_identity.domain.user.value_objects import UserRole
from storerating_identity.exceptions import InvalidTokenError

if TYPE_CHECKING:
    from collections.abc import Collection

    from storerating_identity.services import JWTService

logger = logging.getLogger(__name__)

ADMIN_ONLY = frozenset({UserRole.SYSTEM_ADMINISTRATOR})
NORMAL_USER_ONLY = frozenset({UserRole.NORMAL_USER})
STORE_OWNER_ONLY = frozenset({UserRole.STORE_OWNER})
OWNER_OR_ADMIN = frozenset({UserRole.STORE_OWNER, UserRole.SYSTEM_ADMINISTRATOR})


class AccessGate:
    """Decide whether a bearer token may invoke an operation.

    Three distinct capabilities:

    - ``authorize``: valid token whose role is in the required set
    - ``authenticate``: any valid token
    - ``identify_optional``: anonymous callers are a normal state, not an error
    """

    def __init__(self, jwt_service: JWTService):
        self._jwt_service = jwt_service

    def authenticate(self, token: str | None) -> Identity:
        """Resolve a token into an identity regardless of role.

        Raises
        ------
        UnauthenticatedError
            If no token is given or the token does not verify
        """
        if not token:
            raise UnauthenticatedError("No token provided")
        try:
            payload = self._jwt_service.verify(token)
        except InvalidTokenError as e:
            logger.warning("Rejected token: %s", e.message)
            raise UnauthenticatedError("Invalid token") from e
        return Identity.from_payload(payload)

    def authorize(
        self,
        token: str | None,
        required_roles: Collection[UserRole],
    ) -> Identity:
        """Resolve a token and require its role to be in ``required_roles``.

        Raises
        ------
        UnauthenticatedError
            If no token is given or the token does not verify
        ForbiddenError
            If the caller's role is not admitted
        """
        identity = self.authenticate(token)
        if not identity.has_role(required_roles):
            logger.warning(
                "Forbidden: user %s with role %s",
                identity.user_id,
                identity.role.value,
            )
            raise ForbiddenError("Insufficient permissions")
        return identity

    def identify_optional(self, token: str | None) -> Identity | None:
        """Return the caller's identity, or None for anonymous callers.

        An absent or unverifiable token yields None. Never raises.
        """
        payload = self._jwt_service.try_verify(token)
        if payload is None:
            return None
        return Identity.from_payload(payload)

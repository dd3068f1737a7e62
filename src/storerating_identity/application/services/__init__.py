from storerating_identity.application.services.access_gate import (
    ADMIN_ONLY,
    NORMAL_USER_ONLY,
    OWNER_OR_ADMIN,
    STORE_OWNER_ONLY,
    AccessGate,
)
from storerating_identity.application.services.authentication_service import (
    AuthenticationService,
)

__all__ = [
    "ADMIN_ONLY",
    "NORMAL_USER_ONLY",
    "OWNER_OR_ADMIN",
    "STORE_OWNER_ONLY",
    "AccessGate",
    "AuthenticationService",
]

"""Authentication services: token signing and password hashing."""

from storerating_identity.services.jwt_service import JWTService
from storerating_identity.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]

"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storerating_identity.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRole,
)
from storerating_identity.exceptions import InvalidCredentialsError

if TYPE_CHECKING:
    from storerating_identity.domain.user import UserRepository
    from storerating_identity.repositories import UserCredentialRepository
    from storerating_identity.services import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates password hashing and JWT tokens with the User domain to
    provide:
    - Self-service signup (always as Normal User)
    - Login with password
    - Password change
    - Profile lookup
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def signup(
        self,
        name: str,
        email: str,
        password: str,
        address: str | None = None,
    ) -> User:
        self._password_service.validate_strength(password)

        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        password_hash = self._password_service.hash(password)
        user = await self._user_repo.save(
            User.create(name, email, address=address, role=UserRole.NORMAL_USER),
        )
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)

        logger.info("User signed up: %s (id: %s)", user.email, user.id)
        return user

    async def login(self, email: str, password: str) -> tuple[User, str]:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            logger.warning("Login failed for unknown email")
            raise InvalidCredentialsError

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None or not self._password_service.verify(
            password,
            credential.password_hash,
        ):
            logger.warning("Login failed for user: %s", user.id)
            raise InvalidCredentialsError

        await self._credential_repo.update_last_login(user.id)
        token = self._jwt_service.issue(user.id, user.role)

        logger.info("User logged in: %s", user.id)
        return user, token

    async def change_password(
        self,
        user_id: int,
        current_password: str,
        new_password: str,
    ) -> None:
        credential = await self._credential_repo.find_by_user_id(user_id)
        if credential is None or not self._password_service.verify(
            current_password,
            credential.password_hash,
        ):
            logger.warning("Password change rejected for user: %s", user_id)
            raise InvalidCredentialsError("Invalid current password")

        self._password_service.validate_strength(new_password)
        new_hash = self._password_service.hash(new_password)
        await self._credential_repo.save(user_id=user_id, password_hash=new_hash)

        logger.info("Password changed for user: %s", user_id)

    async def get_profile(self, user_id: int) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

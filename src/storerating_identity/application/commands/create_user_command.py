import logging

from storerating_identity.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserRepository,
    UserRole,
)
from storerating_identity.repositories import UserCredentialRepository
from storerating_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Command to create a new user with any role."""

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service

    async def execute(
        self,
        name: str,
        email: str,
        password: str,
        address: str | None = None,
        role: UserRole = UserRole.NORMAL_USER,
        conflict_message: str | None = None,
    ) -> User:
        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email, conflict_message)

        password_hash = self._password_service.hash(password)
        user = await self._user_repo.save(
            User.create(name, email, address=address, role=role),
        )
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)

        logger.info("Created user %s with role %s", user.id, role.value)
        return user

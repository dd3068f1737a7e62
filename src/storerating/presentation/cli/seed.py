"""Bootstrap data for a fresh database."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from storerating.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from storerating_identity.application.commands import CreateUserCommand
from storerating_identity.domain.user import User, UserRole
from storerating_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)


async def seed_super_admin(  # NOQA: PLR0913
    session: AsyncSession,
    password_service: PasswordHashingService,
    name: str,
    email: str,
    password: str,
    address: str | None = None,
) -> User | None:
    """
    Create the System Administrator account unless the email is taken.

    Returns
    -------
    The created administrator, or None when an account with that email
    already exists (the seed is idempotent).
    """
    factory = SQLAlchemyRepositoryFactory(session)
    if await factory.user_repository().exists_by_email(email):
        logger.info("Super admin %s already exists, skipping", email)
        return None

    command = CreateUserCommand(
        user_repository=factory.user_repository(),
        credential_repository=factory.credential_repository(),
        password_service=password_service,
    )
    admin = await command.execute(
        name=name,
        email=email,
        password=password,
        address=address,
        role=UserRole.SYSTEM_ADMINISTRATOR,
    )
    await session.commit()
    return admin

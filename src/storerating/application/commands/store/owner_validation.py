"""Validation of store owner references."""

from storerating.domain.store import InvalidStoreOwnerError
from storerating_identity.domain.user import User, UserRepository


async def ensure_store_owner(user_repository: UserRepository, owner_id: int) -> User:
    """Return the user behind ``owner_id`` if it has the Store Owner role.

    Raises
    ------
    InvalidStoreOwnerError
        If the user does not exist or has another role
    """
    owner = await user_repository.find_by_id(owner_id)
    if owner is None or not owner.is_store_owner:
        raise InvalidStoreOwnerError(owner_id)
    return owner

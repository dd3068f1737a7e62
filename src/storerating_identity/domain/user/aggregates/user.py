"""User aggregate for identity concerns only."""

from datetime import datetime
from typing import Union

from storerating.domain.shared.time import utc_now
from storerating_identity.domain.user.value_objects import Email, UserRole


class User:
    """
    User aggregate root.

    Holds the public identity of an account (name, email, address, role).
    The password hash is stored separately as a credential and never
    travels with the aggregate.
    """

    def __init__(
        self,
        name: str,
        email: Union[str, Email],
        address: str | None = None,
        role: Union[str, UserRole] = UserRole.NORMAL_USER,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id
        self._name = name
        self._email = email if isinstance(email, Email) else Email(email)
        self._address = address
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def address(self) -> str | None:
        return self._address

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.SYSTEM_ADMINISTRATOR

    @property
    def is_store_owner(self) -> bool:
        return self._role == UserRole.STORE_OWNER

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(
        cls,
        name: str,
        email: Union[str, Email],
        address: str | None = None,
        role: UserRole = UserRole.NORMAL_USER,
    ) -> "User":
        return cls(name=name, email=email, address=address, role=role)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        name: str,
        email: Union[str, Email],
        address: str | None,
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            address=address,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, role={self._role.value})"

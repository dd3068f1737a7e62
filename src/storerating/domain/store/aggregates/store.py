"""Store aggregate."""

from __future__ import annotations

from datetime import datetime

from storerating.domain.shared.exceptions import ValidationError
from storerating.domain.shared.time import utc_now

NAME_MIN_LENGTH = 20
NAME_MAX_LENGTH = 60
ADDRESS_MAX_LENGTH = 400


class Store:
    """A rateable store, optionally owned by one Store Owner."""

    def __init__(
        self,
        name: str,
        email: str,
        address: str | None = None,
        owner_id: int | None = None,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id
        self._name = self._validate_name(name)
        self._email = email.strip().lower()
        self._address = self._validate_address(address)
        self._owner_id = owner_id
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @staticmethod
    def _validate_name(name: str) -> str:
        if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
            msg = f"Name must be {NAME_MIN_LENGTH}-{NAME_MAX_LENGTH} characters"
            raise ValidationError(msg, details={"field": "name"})
        return name

    @staticmethod
    def _validate_address(address: str | None) -> str | None:
        if address is not None and len(address) > ADDRESS_MAX_LENGTH:
            msg = f"Address must be at most {ADDRESS_MAX_LENGTH} characters"
            raise ValidationError(msg, details={"field": "address"})
        return address

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def address(self) -> str | None:
        return self._address

    @property
    def owner_id(self) -> int | None:
        return self._owner_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_owned_by(self, user_id: int) -> bool:
        return self._owner_id is not None and self._owner_id == user_id

    def update(
        self,
        name: str | None = None,
        email: str | None = None,
        address: str | None = None,
        owner_id: int | None = None,
        clear_owner: bool = False,
    ) -> None:
        """Apply a partial update; None leaves a field unchanged.

        ``clear_owner`` detaches the store from its owner.
        """
        if name is not None:
            self._name = self._validate_name(name)
        if email is not None:
            self._email = email.strip().lower()
        if address is not None:
            self._address = self._validate_address(address)
        if clear_owner:
            self._owner_id = None
        elif owner_id is not None:
            self._owner_id = owner_id
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        address: str | None = None,
        owner_id: int | None = None,
    ) -> Store:
        return cls(name=name, email=email, address=address, owner_id=owner_id)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        name: str,
        email: str,
        address: str | None,
        owner_id: int | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> Store:
        return cls(
            id=id,
            name=name,
            email=email,
            address=address,
            owner_id=owner_id,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Store):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"Store(id={self._id}, name={self._name!r}, owner_id={self._owner_id})"

"""Request-scoped caller identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from storerating_identity.domain.user.value_objects import UserRole

if TYPE_CHECKING:
    from collections.abc import Iterable

    from storerating_identity.schemas import TokenPayload


@dataclass(frozen=True)
class Identity:
    """Immutable identity of the caller, decoded from a verified token."""

    user_id: int
    role: UserRole

    @classmethod
    def from_payload(cls, payload: TokenPayload) -> Identity:
        return cls(user_id=payload.user_id, role=payload.role)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.SYSTEM_ADMINISTRATOR

    @property
    def is_store_owner(self) -> bool:
        return self.role == UserRole.STORE_OWNER

    def has_role(self, roles: Iterable[UserRole]) -> bool:
        return self.role in roles

    def __str__(self) -> str:
        return f"Identity({self.user_id}, {self.role.value})"

"""Filter and sort criteria for directory listings.

Client-supplied sort keys are checked against an allow-list; anything
outside it falls back to ``name ASC`` without an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_SORT_FIELD = "name"

USER_SORT_FIELDS = frozenset({"id", "name", "email", "address", "role"})
STORE_SORT_FIELDS = frozenset({"id", "name", "address", "averageRating"})
ADMIN_STORE_SORT_FIELDS = STORE_SORT_FIELDS | {"email"}


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class SortSpec:
    """A single sort key plus direction, already checked against an allow-list."""

    field: str = DEFAULT_SORT_FIELD
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC

    @classmethod
    def parse(
        cls,
        order_by: str | None,
        order: str | None,
        allowed_fields: frozenset[str],
    ) -> SortSpec:
        """Build a sort spec from raw query parameters.

        Parameters
        ----------
        order_by
            Requested sort key; unknown keys fall back to ``name``
        order
            ``ASC`` or ``DESC`` in any case; anything else falls back to ``ASC``
        allowed_fields
            Sort keys admitted by the listing
        """
        field = order_by if order_by in allowed_fields else DEFAULT_SORT_FIELD
        try:
            direction = SortDirection((order or "").strip().upper())
        except ValueError:
            direction = SortDirection.ASC
        return cls(field=field, direction=direction)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class UserFilter:
    """Case-insensitive substring filters over the user directory."""

    name: str | None = None
    email: str | None = None
    address: str | None = None
    role: str | None = None

    def __post_init__(self) -> None:
        for attr in ("name", "email", "address", "role"):
            object.__setattr__(self, attr, _clean(getattr(self, attr)))


@dataclass(frozen=True)
class StoreFilter:
    """Case-insensitive substring filters over the store directory."""

    name: str | None = None
    email: str | None = None
    address: str | None = None

    def __post_init__(self) -> None:
        for attr in ("name", "email", "address"):
            object.__setattr__(self, attr, _clean(getattr(self, attr)))

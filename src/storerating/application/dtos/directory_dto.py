"""Read models for user and store listings.

Produced by the directory read adapter straight from SQL rows; averages
are unrounded Decimals computed by the database.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from storerating_identity.domain.user import UserRole


@dataclass(frozen=True)
class OwnerSummaryDTO:
    """Public identity of a store's owner."""

    id: int
    name: str
    email: str


@dataclass(frozen=True)
class UserListItemDTO:
    """One row of the admin user listing.

    ``average_rating`` is set for Store Owners only.
    """

    id: int
    name: str
    email: str
    address: str | None
    role: UserRole
    average_rating: Decimal | None = None


@dataclass(frozen=True)
class UserDetailDTO:
    """Admin view of a single user.

    ``store_rating`` is the owner aggregate, set for Store Owners only.
    """

    id: int
    name: str
    email: str
    address: str | None
    role: UserRole
    store_rating: Decimal | None = None


@dataclass(frozen=True)
class StoreListItemDTO:
    """A store with its aggregate rating.

    ``user_rating`` is the caller's own rating, None when the caller has
    not rated the store or is anonymous.
    """

    id: int
    name: str
    email: str
    address: str | None
    owner_id: int | None
    average_rating: Decimal
    created_at: datetime
    updated_at: datetime
    owner: OwnerSummaryDTO | None = None
    user_rating: int | None = None

"""Store domain: rateable stores and their single owner."""

from storerating.domain.store.aggregates import Store
from storerating.domain.store.exceptions import (
    InvalidStoreOwnerError,
    StoreEmailAlreadyExistsError,
    StoreNotFoundError,
)
from storerating.domain.store.repositories import StoreRepository

__all__ = [
    "InvalidStoreOwnerError",
    "Store",
    "StoreEmailAlreadyExistsError",
    "StoreNotFoundError",
    "StoreRepository",
]

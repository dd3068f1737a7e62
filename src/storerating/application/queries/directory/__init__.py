"""Directory queries: filtered, sorted listings of users and stores."""

from storerating.application.queries.directory.get_store_query import GetStoreQuery
from storerating.application.queries.directory.get_user_detail_query import (
    GetUserDetailQuery,
)
from storerating.application.queries.directory.list_stores_query import (
    ListStoresQuery,
)
from storerating.application.queries.directory.list_users_query import (
    ListUsersQuery,
)

__all__ = [
    "GetStoreQuery",
    "GetUserDetailQuery",
    "ListStoresQuery",
    "ListUsersQuery",
]

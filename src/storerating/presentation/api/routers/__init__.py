from storerating.presentation.api.routers.admin import router as admin_router
from storerating.presentation.api.routers.auth import router as auth_router
from storerating.presentation.api.routers.ratings import router as ratings_router
from storerating.presentation.api.routers.store_owner import (
    router as store_owner_router,
)
from storerating.presentation.api.routers.stores import router as stores_router

__all__ = [
    "admin_router",
    "auth_router",
    "ratings_router",
    "store_owner_router",
    "stores_router",
]

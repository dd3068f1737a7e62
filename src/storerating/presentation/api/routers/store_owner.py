"""Store owner router: the owner's store and its rating dashboard."""

import logging
from typing import Annotated

from fastapi import APIRouter, Path

from storerating.application.queries.rating import (
    MyStoreQuery,
    StoreOwnerDashboardQuery,
)
from storerating.presentation.api.dependencies import (
    OwnerOrAdminIdentity,
    RepoFactory,
    StoreOwnerIdentity,
)
from storerating.presentation.api.routers._mappers import (
    dashboard_response,
    store_response,
)
from storerating.presentation.api.schemas import (
    StoreDashboardResponse,
    StoreResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/my-store",
    summary="Get the caller's store",
    response_model_exclude_unset=True,
    responses={
        200: {"description": "The store owned by the caller"},
        401: {"description": "Not authenticated"},
        403: {"description": "Not a Store Owner"},
        404: {"description": "No store found for this owner"},
    },
)
async def get_my_store(
    identity: StoreOwnerIdentity,
    factory: RepoFactory,
) -> StoreResponse:
    store = await MyStoreQuery.from_factory(factory).execute(identity.user_id)
    return store_response(store, identified=False)


@router.get(
    "/dashboard/{storeId}",
    summary="Ratings dashboard of a store",
    responses={
        200: {"description": "Every rating of the store and their average"},
        401: {"description": "Not authenticated"},
        403: {"description": "Store not owned by the caller"},
    },
)
async def get_dashboard(
    store_id: Annotated[int, Path(ge=1, alias="storeId")],
    identity: OwnerOrAdminIdentity,
    factory: RepoFactory,
) -> StoreDashboardResponse:
    """
    Every rating of a store with the raters' identity, plus the average.

    Store Owners may only open their own store; administrators any store.
    """
    dashboard = await StoreOwnerDashboardQuery.from_factory(factory).execute(
        store_id,
        identity,
    )
    return dashboard_response(dashboard)

"""Admin router for platform statistics and user management.

Every endpoint here admits System Administrators only.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Query, status

from storerating.application.dtos import StoreFilter, UserFilter
from storerating.application.queries.directory import (
    GetUserDetailQuery,
    ListStoresQuery,
    ListUsersQuery,
)
from storerating.application.queries.rating import PlatformStatsQuery
from storerating.presentation.api.dependencies import (
    AdminIdentity,
    PasswordService,
    RepoFactory,
)
from storerating.presentation.api.routers._mappers import (
    store_response,
    user_detail_response,
    user_list_item_response,
)
from storerating.presentation.api.schemas import (
    CreateUserRequest,
    PlatformStatsResponse,
    StoreResponse,
    UserDetailResponse,
    UserListItemResponse,
    UserResponse,
)
from storerating_identity.application.commands import CreateUserCommand

logger = logging.getLogger(__name__)

router = APIRouter()

_ADMIN_RESPONSES = {
    401: {"description": "Not authenticated"},
    403: {"description": "Not a System Administrator"},
}


@router.get(
    "/dashboard",
    summary="Platform statistics",
    responses={200: {"description": "Counts of users, stores and ratings"}}
    | _ADMIN_RESPONSES,
)
async def get_dashboard(
    _admin: AdminIdentity,
    factory: RepoFactory,
) -> PlatformStatsResponse:
    stats = await PlatformStatsQuery.from_factory(factory).execute()
    return PlatformStatsResponse(
        users_count=stats.users_count,
        stores_count=stats.stores_count,
        ratings_count=stats.ratings_count,
    )


@router.get(
    "/users",
    summary="List users",
    response_model_exclude_unset=True,
    responses={200: {"description": "Filtered, sorted users"}} | _ADMIN_RESPONSES,
)
async def list_users(  # NOQA: PLR0913
    _admin: AdminIdentity,
    factory: RepoFactory,
    name: str | None = None,
    email: str | None = None,
    address: str | None = None,
    role: str | None = None,
    order_by: Annotated[str | None, Query(alias="orderBy")] = None,
    order: str | None = None,
) -> list[UserListItemResponse]:
    """
    List users with case-insensitive substring filters.

    Unknown sort keys fall back to ``name`` ascending. Store Owners carry
    the average rating across all of their stores.
    """
    users = await ListUsersQuery.from_factory(factory).execute(
        user_filter=UserFilter(name=name, email=email, address=address, role=role),
        order_by=order_by,
        order=order,
    )
    return [user_list_item_response(user) for user in users]


@router.get(
    "/users/{user_id}",
    summary="Get user details",
    response_model_exclude_unset=True,
    responses={
        200: {"description": "User details"},
        404: {"description": "User not found"},
    }
    | _ADMIN_RESPONSES,
)
async def get_user(
    user_id: Annotated[int, Path(ge=1)],
    _admin: AdminIdentity,
    factory: RepoFactory,
) -> UserDetailResponse:
    user = await GetUserDetailQuery.from_factory(factory).execute(user_id)
    return user_detail_response(user)


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user with any role",
    responses={
        201: {"description": "User created"},
        400: {"description": "Invalid input"},
        409: {"description": "Email already registered"},
    }
    | _ADMIN_RESPONSES,
)
async def create_user(
    request: CreateUserRequest,
    _admin: AdminIdentity,
    factory: RepoFactory,
    password_service: PasswordService,
) -> UserResponse:
    command = CreateUserCommand(
        user_repository=factory.user_repository(),
        credential_repository=factory.credential_repository(),
        password_service=password_service,
    )
    user = await command.execute(
        name=request.name,
        email=request.email,
        password=request.password,
        address=request.address,
        role=request.role,
    )
    await factory.session.commit()

    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        address=user.address,
        role=user.role,
    )


@router.get(
    "/stores",
    summary="List stores",
    response_model_exclude_unset=True,
    responses={200: {"description": "Stores with average ratings"}}
    | _ADMIN_RESPONSES,
)
async def list_stores(  # NOQA: PLR0913
    _admin: AdminIdentity,
    factory: RepoFactory,
    name: str | None = None,
    email: str | None = None,
    address: str | None = None,
    order_by: Annotated[str | None, Query(alias="orderBy")] = None,
    order: str | None = None,
) -> list[StoreResponse]:
    stores = await ListStoresQuery.from_factory(factory).execute(
        store_filter=StoreFilter(name=name, email=email, address=address),
        order_by=order_by,
        order=order,
        admin_view=True,
    )
    return [store_response(store, identified=False) for store in stores]

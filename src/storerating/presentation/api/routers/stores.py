"""Stores router: public directory plus admin-only management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Query, status

from storerating.application.commands.store import (
    CreateStoreCommand,
    DeleteStoreCommand,
    NewOwnerDetails,
    UpdateStoreCommand,
)
from storerating.application.dtos import StoreFilter
from storerating.application.queries.directory import GetStoreQuery, ListStoresQuery
from storerating.presentation.api.dependencies import (
    AdminIdentity,
    OptionalIdentity,
    PasswordService,
    RepoFactory,
)
from storerating.presentation.api.routers._mappers import store_response
from storerating.presentation.api.schemas import (
    CreateStoreRequest,
    MessageResponse,
    StoreResponse,
    UpdateStoreRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

StoreId = Annotated[int, Path(ge=1, description="Store id")]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a store",
    response_model_exclude_unset=True,
    responses={
        201: {"description": "Store created"},
        400: {"description": "Invalid input or owner"},
        401: {"description": "Not authenticated"},
        403: {"description": "Not a System Administrator"},
        409: {"description": "Store or owner email already registered"},
    },
)
async def create_store(
    request: CreateStoreRequest,
    _admin: AdminIdentity,
    factory: RepoFactory,
    password_service: PasswordService,
) -> StoreResponse:
    """
    Create a store owned by an existing Store Owner (``ownerId``) or by a
    new Store Owner described inline (``owner``).

    Both the owner account and the store are written in one transaction.
    """
    new_owner = (
        NewOwnerDetails(
            name=request.owner.name,
            email=request.owner.email,
            password=request.owner.password,
            address=request.owner.address,
        )
        if request.owner
        else None
    )
    command = CreateStoreCommand.from_factory(factory, password_service)
    store = await command.execute(
        name=request.name,
        email=request.email,
        address=request.address,
        owner_id=request.owner_id,
        new_owner=new_owner,
    )
    created = await GetStoreQuery.from_factory(factory).execute(store.id)
    await factory.session.commit()
    return store_response(created, identified=False)


@router.get(
    "",
    summary="List stores",
    response_model_exclude_unset=True,
    responses={200: {"description": "Stores with average (and own) ratings"}},
)
async def list_stores(
    identity: OptionalIdentity,
    factory: RepoFactory,
    name: str | None = None,
    address: str | None = None,
    order_by: Annotated[str | None, Query(alias="orderBy")] = None,
    order: str | None = None,
) -> list[StoreResponse]:
    """
    List stores, optionally filtered by name and address.

    Callers presenting a valid token also see their own rating of each
    store as ``userRating``; anonymous callers do not get the field.
    """
    caller_id = identity.user_id if identity else None
    stores = await ListStoresQuery.from_factory(factory).execute(
        store_filter=StoreFilter(name=name, address=address),
        order_by=order_by,
        order=order,
        caller_id=caller_id,
    )
    return [store_response(store, identified=identity is not None) for store in stores]


@router.get(
    "/{store_id}",
    summary="Get store details",
    response_model_exclude_unset=True,
    responses={
        200: {"description": "Store details"},
        404: {"description": "Store not found"},
    },
)
async def get_store(
    store_id: StoreId,
    identity: OptionalIdentity,
    factory: RepoFactory,
) -> StoreResponse:
    caller_id = identity.user_id if identity else None
    store = await GetStoreQuery.from_factory(factory).execute(
        store_id,
        caller_id=caller_id,
    )
    return store_response(store, identified=identity is not None)


@router.put(
    "/{store_id}",
    summary="Update a store",
    response_model_exclude_unset=True,
    responses={
        200: {"description": "Store updated"},
        400: {"description": "Invalid input or owner"},
        404: {"description": "Store not found"},
        409: {"description": "Store email already registered"},
    },
)
async def update_store(
    store_id: StoreId,
    request: UpdateStoreRequest,
    _admin: AdminIdentity,
    factory: RepoFactory,
) -> StoreResponse:
    """
    Partially update a store. An explicit ``"ownerId": null`` detaches the
    store from its owner; omitting the field leaves the owner unchanged.
    """
    clear_owner = "owner_id" in request.model_fields_set and request.owner_id is None
    await UpdateStoreCommand.from_factory(factory).execute(
        store_id,
        name=request.name,
        email=request.email,
        address=request.address,
        owner_id=request.owner_id,
        clear_owner=clear_owner,
    )
    updated = await GetStoreQuery.from_factory(factory).execute(store_id)
    await factory.session.commit()
    return store_response(updated, identified=False)


@router.delete(
    "/{store_id}",
    summary="Delete a store and its ratings",
    responses={
        200: {"description": "Store deleted"},
        404: {"description": "Store not found"},
    },
)
async def delete_store(
    store_id: StoreId,
    _admin: AdminIdentity,
    factory: RepoFactory,
) -> MessageResponse:
    await DeleteStoreCommand.from_factory(factory).execute(store_id)
    await factory.session.commit()
    logger.info("Deleted store %s", store_id)
    return MessageResponse(message="Store deleted")

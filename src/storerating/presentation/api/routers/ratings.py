"""Ratings router: submit, look up and average store ratings."""

import logging
from typing import Annotated

from fastapi import APIRouter, Path, status

from storerating.application.commands.rating import SubmitRatingCommand
from storerating.application.queries.rating import (
    StoreAverageQuery,
    UserStoreRatingQuery,
)
from storerating.presentation.api.dependencies import (
    AuthenticatedIdentity,
    NormalUserIdentity,
    RepoFactory,
)
from storerating.presentation.api.routers._mappers import rating_response
from storerating.presentation.api.schemas import (
    AverageResponse,
    RatingSavedResponse,
    SubmitRatingRequest,
    UserRatingResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

StoreId = Annotated[int, Path(ge=1, alias="storeId", description="Store id")]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Rate a store",
    responses={
        201: {"description": "Rating created or replaced"},
        400: {"description": "Rating out of range"},
        401: {"description": "Not authenticated"},
        403: {"description": "Not a Normal User"},
        404: {"description": "Store not found"},
    },
)
async def submit_rating(
    request: SubmitRatingRequest,
    identity: NormalUserIdentity,
    factory: RepoFactory,
) -> RatingSavedResponse:
    """
    Create the caller's rating of a store, or replace it if one exists.

    A user holds at most one rating per store.
    """
    rating = await SubmitRatingCommand.from_factory(factory).execute(
        user_id=identity.user_id,
        store_id=request.store_id,
        value=request.rating,
    )
    await factory.session.commit()
    logger.info(
        "Rating %s saved for store %s by user %s",
        rating.value,
        rating.store_id,
        rating.user_id,
    )
    return RatingSavedResponse(message="Rating saved", rating=rating_response(rating))


@router.get(
    "/user/{storeId}",
    summary="Get the caller's rating of a store",
    responses={
        200: {"description": "The caller's rating, null when not rated"},
        401: {"description": "Not authenticated"},
    },
)
async def get_user_rating(
    store_id: StoreId,
    identity: AuthenticatedIdentity,
    factory: RepoFactory,
) -> UserRatingResponse:
    rating = await UserStoreRatingQuery.from_factory(factory).execute(
        identity.user_id,
        store_id,
    )
    return UserRatingResponse(rating=rating)


@router.get(
    "/average/{storeId}",
    summary="Get a store's average rating",
    responses={200: {"description": "Average rating, 0 when unrated"}},
)
async def get_average(store_id: StoreId, factory: RepoFactory) -> AverageResponse:
    average = await StoreAverageQuery.from_factory(factory).execute(store_id)
    return AverageResponse(average=float(average))

"""Map application DTOs onto response schemas."""

from storerating.application.dtos import (
    StoreDashboardDTO,
    StoreListItemDTO,
    UserDetailDTO,
    UserListItemDTO,
)
from storerating.domain.rating import Rating
from storerating.presentation.api.schemas import (
    OwnerSummaryResponse,
    RaterResponse,
    RatingResponse,
    StoreDashboardResponse,
    StoreRatingResponse,
    StoreResponse,
    UserDetailResponse,
    UserListItemResponse,
)
from storerating_identity.domain.user import UserRole


def store_response(store: StoreListItemDTO, identified: bool) -> StoreResponse:
    """Build a store response; ``userRating`` is only set for identified callers."""
    owner = (
        OwnerSummaryResponse(
            id=store.owner.id,
            name=store.owner.name,
            email=store.owner.email,
        )
        if store.owner
        else None
    )
    fields = {
        "id": store.id,
        "name": store.name,
        "email": store.email,
        "address": store.address,
        "owner_id": store.owner_id,
        "average_rating": float(store.average_rating),
        "owner": owner,
        "created_at": store.created_at,
        "updated_at": store.updated_at,
    }
    if identified:
        fields["user_rating"] = store.user_rating
    return StoreResponse(**fields)


def user_list_item_response(user: UserListItemDTO) -> UserListItemResponse:
    """Owners carry ``averageRating``; other roles omit it."""
    fields = {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "address": user.address,
        "role": user.role,
    }
    if user.role == UserRole.STORE_OWNER:
        fields["average_rating"] = float(user.average_rating or 0)
    return UserListItemResponse(**fields)


def user_detail_response(user: UserDetailDTO) -> UserDetailResponse:
    """Owners carry ``storeRating``; other roles omit it."""
    fields = {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "address": user.address,
        "role": user.role,
    }
    if user.role == UserRole.STORE_OWNER:
        fields["store_rating"] = float(user.store_rating or 0)
    return UserDetailResponse(**fields)


def rating_response(rating: Rating) -> RatingResponse:
    return RatingResponse(
        id=rating.id,
        rating=rating.value,
        user_id=rating.user_id,
        store_id=rating.store_id,
        created_at=rating.created_at,
        updated_at=rating.updated_at,
    )


def dashboard_response(dashboard: StoreDashboardDTO) -> StoreDashboardResponse:
    return StoreDashboardResponse(
        ratings=[
            StoreRatingResponse(
                id=row.id,
                rating=row.rating,
                user_id=row.user_id,
                store_id=row.store_id,
                created_at=row.created_at,
                updated_at=row.updated_at,
                user=RaterResponse(
                    id=row.user.id,
                    name=row.user.name,
                    email=row.user.email,
                ),
            )
            for row in dashboard.ratings
        ],
        average=float(dashboard.average),
    )

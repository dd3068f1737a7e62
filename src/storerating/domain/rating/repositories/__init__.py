from storerating.domain.rating.repositories.rating_repository import RatingRepository

__all__ = ["RatingRepository"]

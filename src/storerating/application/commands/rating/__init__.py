from storerating.application.commands.rating.submit_rating_command import (
    SubmitRatingCommand,
)

__all__ = ["SubmitRatingCommand"]

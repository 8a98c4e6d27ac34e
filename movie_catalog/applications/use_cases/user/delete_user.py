import uuid

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.applications.services.review_aggregation_service import ReviewAggregationService
from movie_catalog.domain.exceptions import ForbiddenError, NotFoundError
from movie_catalog.domain.models.actor import Actor
from movie_catalog.domain.ports.repositories.review_repository import ReviewRepository
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.services.authorization import is_admin
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeleteUserUseCase:
    """Deletes an account together with its reviews and refreshes the ratings they contributed to"""

    def __init__(
        self,
        user_repository: UserRepository,
        review_repository: ReviewRepository,
        review_service: ReviewAggregationService,
    ):
        self.user_repository = user_repository
        self.review_repository = review_repository
        self.review_service = review_service

    async def execute(self, actor: Actor, user_id: uuid.UUID) -> Message:
        if actor.id != user_id and not is_admin(actor.roles):
            raise ForbiddenError("You can only delete your own account")

        existing_user = await self.user_repository.get_by_id(user_id)
        if not existing_user:
            raise NotFoundError("User not found")

        reviewed_movie_ids = {review.movie_id for review in await self.review_repository.get_by_user_id(user_id)}

        success = await self.user_repository.delete(user_id)
        if not success:
            raise NotFoundError("User not found")

        for movie_id in sorted(reviewed_movie_ids):
            try:
                await self.review_service.recompute_rating(movie_id)
            except NotFoundError:
                # the movie was removed meanwhile, its reviews went with it
                logger.warning(f"Skipped rating refresh of deleted movie: movie={movie_id}")

        logger.info(f"User deleted: {user_id}")

        return Message(message="User deleted")

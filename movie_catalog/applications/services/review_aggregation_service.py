import uuid
from typing import List, Optional

from movie_catalog.applications.interfaces.dtos.review import ReviewSchema
from movie_catalog.domain.exceptions import (
    BadRequestError,
    ConflictError,
    ConstraintViolationError,
    ForbiddenError,
    NotFoundError,
    RecordNotFoundError,
)
from movie_catalog.domain.models.actor import Actor
from movie_catalog.domain.models.review import Review
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.repositories.review_repository import ReviewRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.services.authorization import is_admin
from movie_catalog.domain.services.rating import compute_movie_rating

MOVIE_NOT_FOUND = "Movie not found"
REVIEW_NOT_FOUND = "Review not found"


class ReviewAggregationService:
    """Owns review mutations and keeps every movie's rating in line with its reviews.

    A movie's rating is the mean of all of its review ratings, hidden reviews
    included, rounded half-up to one decimal. It is recomputed after every
    create, edit and delete. The check, mutate and recompute steps are not
    wrapped in a transaction: the (user_id, movie_id) uniqueness of the store
    is the only guard against concurrent duplicates.
    """

    def __init__(
        self,
        movie_repository: MovieRepository,
        review_repository: ReviewRepository,
        logger: LoggerPort,
    ):
        self.movie_repository = movie_repository
        self.review_repository = review_repository
        self.logger = logger

    async def recompute_rating(self, movie_id: int) -> None:
        self.logger.info(f"Update movie rating: movie={movie_id}")

        reviews = await self.review_repository.get_by_movie_id(movie_id)
        rating = compute_movie_rating(review.rating for review in reviews)

        try:
            await self.movie_repository.update_rating(movie_id, rating)
        except RecordNotFoundError as e:
            self.logger.debug(f"Failed to update movie rating: {e}")
            self.logger.error(f"Update movie rating failed. Movie not found: movie={movie_id}")
            raise NotFoundError(MOVIE_NOT_FOUND) from e

        self.logger.info(f"Updated movie rating: movie={movie_id} rating={rating} reviews={len(reviews)}")

    async def get_movie_reviews(self, movie_id: int) -> List[Review]:
        self.logger.info(f"Find movie reviews: movie={movie_id}")

        await self._ensure_movie_exists(movie_id, "Find movie reviews")
        reviews = await self.review_repository.get_by_movie_id(movie_id)

        self.logger.info(f"Found movie reviews: movie={movie_id} count={len(reviews)}")
        return reviews

    async def create_review(self, actor: Actor, movie_id: int, review_data: ReviewSchema) -> Review:
        self.logger.info(f"Create review: user={actor.id} movie={movie_id} rating={review_data.rating}")

        await self._ensure_movie_exists(movie_id, "Create review")

        if await self.review_repository.get(actor.id, movie_id):
            self.logger.error(f"Create review failed. Review already exists: user={actor.id} movie={movie_id}")
            raise ConflictError("You have already reviewed this movie")

        review = Review(user_id=actor.id, movie_id=movie_id, rating=review_data.rating, text=review_data.text)
        try:
            created = await self.review_repository.create(review)
        except ConstraintViolationError as e:
            self.logger.debug(f"Failed to create review: {e}")
            if await self.review_repository.get(actor.id, movie_id):
                self.logger.error(f"Create review failed. Review created concurrently: user={actor.id} movie={movie_id}")
                raise ConflictError("You have already reviewed this movie") from e
            self.logger.error(f"Create review failed with wrong data: user={actor.id} movie={movie_id}")
            raise BadRequestError("Invalid review data") from e

        await self.recompute_rating(movie_id)

        self.logger.info(f"Created review: user={actor.id} movie={movie_id}")
        return created

    async def edit_review(self, actor: Actor, movie_id: int, review_data: ReviewSchema) -> Review:
        self.logger.info(f"Edit review: user={actor.id} movie={movie_id} rating={review_data.rating}")

        await self._ensure_movie_exists(movie_id, "Edit review")

        # Only the author's own review is ever looked up, there is no edit on behalf of others
        existing = await self.review_repository.get(actor.id, movie_id)
        if not existing:
            self.logger.error(f"Edit review failed. Review not found: user={actor.id} movie={movie_id}")
            raise NotFoundError(REVIEW_NOT_FOUND)

        changed = existing.model_copy(update={"rating": review_data.rating, "text": review_data.text})
        try:
            updated = await self.review_repository.update(changed)
        except RecordNotFoundError as e:
            self.logger.debug(f"Failed to edit review: {e}")
            self.logger.error(f"Edit review failed. Review disappeared: user={actor.id} movie={movie_id}")
            raise NotFoundError(REVIEW_NOT_FOUND) from e
        except ConstraintViolationError as e:
            self.logger.debug(f"Failed to edit review: {e}")
            self.logger.error(f"Edit review failed with wrong data: user={actor.id} movie={movie_id}")
            raise BadRequestError("Invalid review data") from e

        await self.recompute_rating(movie_id)

        self.logger.info(f"Edited review: user={actor.id} movie={movie_id}")
        return updated

    async def delete_review(
        self, actor: Actor, movie_id: int, target_user_id: Optional[uuid.UUID] = None
    ) -> Review:
        self.logger.info(f"Delete review: actor={actor.id} movie={movie_id} target={target_user_id}")

        await self._ensure_movie_exists(movie_id, "Delete review")

        actor_is_admin = is_admin(actor.roles)
        if not actor_is_admin and target_user_id is not None and target_user_id != actor.id:
            self.logger.error(
                f"Delete review failed. User does not own the review: actor={actor.id} target={target_user_id}"
            )
            raise ForbiddenError("You can only delete your own review")

        owner_id = target_user_id if actor_is_admin and target_user_id is not None else actor.id

        if not await self.review_repository.get(owner_id, movie_id):
            self.logger.error(f"Delete review failed. Review not found: user={owner_id} movie={movie_id}")
            raise NotFoundError(REVIEW_NOT_FOUND)

        try:
            deleted = await self.review_repository.delete(owner_id, movie_id)
        except RecordNotFoundError as e:
            self.logger.debug(f"Failed to delete review: {e}")
            self.logger.error(f"Delete review failed. Review disappeared: user={owner_id} movie={movie_id}")
            raise NotFoundError(REVIEW_NOT_FOUND) from e

        await self.recompute_rating(movie_id)

        self.logger.info(f"Deleted review: user={owner_id} movie={movie_id}")
        return deleted

    async def hide_review(self, movie_id: int, target_user_id: uuid.UUID) -> Review:
        return await self.set_visibility(movie_id, target_user_id, hidden=True)

    async def show_review(self, movie_id: int, target_user_id: uuid.UUID) -> Review:
        return await self.set_visibility(movie_id, target_user_id, hidden=False)

    async def set_visibility(self, movie_id: int, target_user_id: uuid.UUID, hidden: bool) -> Review:
        """Toggle the hidden flag of a review. The rating is left as is."""
        action = "Hide review" if hidden else "Show review"
        self.logger.info(f"{action}: user={target_user_id} movie={movie_id}")

        await self._ensure_movie_exists(movie_id, action)

        existing = await self.review_repository.get(target_user_id, movie_id)
        if not existing:
            self.logger.error(f"{action} failed. Review not found: user={target_user_id} movie={movie_id}")
            raise NotFoundError(REVIEW_NOT_FOUND)

        try:
            updated = await self.review_repository.update(existing.model_copy(update={"hidden": hidden}))
        except (RecordNotFoundError, ConstraintViolationError) as e:
            self.logger.debug(f"Failed to change review visibility: {e}")
            self.logger.error(f"{action} failed: user={target_user_id} movie={movie_id}")
            raise NotFoundError(REVIEW_NOT_FOUND) from e

        self.logger.info(f"{action} done: user={target_user_id} movie={movie_id}")
        return updated

    async def _ensure_movie_exists(self, movie_id: int, action: str) -> None:
        if not await self.movie_repository.get_by_id(movie_id):
            self.logger.error(f"{action} failed. Movie not found: movie={movie_id}")
            raise NotFoundError(MOVIE_NOT_FOUND)

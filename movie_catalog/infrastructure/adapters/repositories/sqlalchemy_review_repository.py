import uuid
from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.exceptions import ConstraintViolationError, RecordNotFoundError
from movie_catalog.domain.models.review import Review as DomainReview
from movie_catalog.domain.ports.repositories.review_repository import ReviewRepository
from movie_catalog.infrastructure.persistence.models import Review as SQLReview
from movie_catalog.infrastructure.persistence.models import User as SQLUser


class SQLAlchemyReviewRepository(ReviewRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_review: SQLReview, reviewer_name: Optional[str]) -> DomainReview:
        return DomainReview(
            user_id=sql_review.user_id,
            movie_id=sql_review.movie_id,
            rating=sql_review.rating,
            text=sql_review.text,
            hidden=sql_review.hidden,
            created_at=sql_review.created_at,
            reviewer_name=reviewer_name,
        )

    def _with_reviewer(self):
        return select(SQLReview, SQLUser.full_name).outerjoin(SQLUser, SQLUser.id == SQLReview.user_id)

    async def _get_sql_review(self, user_id: uuid.UUID, movie_id: int) -> SQLReview:
        sql_review = await self.session.scalar(
            select(SQLReview).where(SQLReview.user_id == user_id, SQLReview.movie_id == movie_id)
        )
        if not sql_review:
            raise RecordNotFoundError(f"Review of user {user_id} for movie {movie_id} not found")
        return sql_review

    async def _reviewer_name(self, user_id: uuid.UUID) -> Optional[str]:
        return await self.session.scalar(select(SQLUser.full_name).where(SQLUser.id == user_id))

    async def _commit(self, user_id: uuid.UUID, movie_id: int) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConstraintViolationError(
                f"Review of user {user_id} for movie {movie_id} violates a constraint"
            ) from e

    async def get(self, user_id: uuid.UUID, movie_id: int) -> Optional[DomainReview]:
        result = await self.session.execute(
            self._with_reviewer().where(SQLReview.user_id == user_id, SQLReview.movie_id == movie_id)
        )
        row = result.one_or_none()
        return self._to_domain(row[0], row[1]) if row else None

    async def get_by_movie_id(self, movie_id: int) -> List[DomainReview]:
        result = await self.session.execute(
            self._with_reviewer().where(SQLReview.movie_id == movie_id).order_by(SQLReview.created_at)
        )
        return [self._to_domain(sql_review, name) for sql_review, name in result.all()]

    async def get_by_user_id(self, user_id: uuid.UUID) -> List[DomainReview]:
        result = await self.session.execute(self._with_reviewer().where(SQLReview.user_id == user_id))
        return [self._to_domain(sql_review, name) for sql_review, name in result.all()]

    async def create(self, review: DomainReview) -> DomainReview:
        # plain INSERT so a duplicate pair reaches the database unique check
        statement = insert(SQLReview).values(
            user_id=review.user_id,
            movie_id=review.movie_id,
            rating=review.rating,
            text=review.text,
            hidden=review.hidden,
        )
        try:
            await self.session.execute(statement)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConstraintViolationError(
                f"Review of user {review.user_id} for movie {review.movie_id} violates a constraint"
            ) from e
        return await self.get(review.user_id, review.movie_id)

    async def update(self, review: DomainReview) -> DomainReview:
        sql_review = await self._get_sql_review(review.user_id, review.movie_id)

        sql_review.rating = review.rating
        sql_review.text = review.text
        sql_review.hidden = review.hidden

        await self._commit(review.user_id, review.movie_id)
        await self.session.refresh(sql_review)
        return self._to_domain(sql_review, await self._reviewer_name(review.user_id))

    async def delete(self, user_id: uuid.UUID, movie_id: int) -> DomainReview:
        sql_review = await self._get_sql_review(user_id, movie_id)
        deleted = self._to_domain(sql_review, await self._reviewer_name(user_id))

        await self.session.delete(sql_review)
        await self.session.commit()
        return deleted

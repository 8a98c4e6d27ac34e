from typing import List, Optional, Tuple

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.exceptions import ConstraintViolationError, RecordNotFoundError
from movie_catalog.domain.models.movie import Movie as DomainMovie
from movie_catalog.domain.models.movie import MovieFilter
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.persistence.models import Genre as SQLGenre
from movie_catalog.infrastructure.persistence.models import Movie as SQLMovie
from movie_catalog.infrastructure.persistence.models import Review as SQLReview


class SQLAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_movie: SQLMovie, genre_name: Optional[str] = None) -> DomainMovie:
        return DomainMovie(
            id=sql_movie.id,
            name=sql_movie.name,
            description=sql_movie.description,
            price=sql_movie.price,
            location=sql_movie.location,
            genre_id=sql_movie.genre_id,
            published=sql_movie.published,
            image_url=sql_movie.image_url,
            rating=sql_movie.rating,
            genre_name=genre_name,
            created_at=sql_movie.created_at,
        )

    def _with_genre(self):
        return select(SQLMovie, SQLGenre.name).outerjoin(SQLGenre, SQLGenre.id == SQLMovie.genre_id)

    async def _get_one(self, *conditions) -> Optional[DomainMovie]:
        result = await self.session.execute(self._with_genre().where(*conditions))
        row = result.one_or_none()
        return self._to_domain(row[0], row[1]) if row else None

    async def _commit(self, movie_name: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConstraintViolationError(f"Movie '{movie_name}' violates a constraint") from e

    async def get_by_id(self, movie_id: int) -> Optional[DomainMovie]:
        return await self._get_one(SQLMovie.id == movie_id)

    async def get_by_name(self, name: str) -> Optional[DomainMovie]:
        return await self._get_one(SQLMovie.name == name)

    async def find_all(self, movie_filter: MovieFilter) -> Tuple[List[DomainMovie], int]:
        conditions = [
            SQLMovie.published == movie_filter.published,
            SQLMovie.price >= movie_filter.min_price,
            SQLMovie.price <= movie_filter.max_price,
        ]
        if movie_filter.locations:
            conditions.append(SQLMovie.location.in_(movie_filter.locations))
        if movie_filter.genre_id is not None:
            conditions.append(SQLMovie.genre_id == movie_filter.genre_id)

        order = SQLMovie.created_at.desc() if movie_filter.newest_first else SQLMovie.created_at.asc()
        query = (
            self._with_genre()
            .where(*conditions)
            .order_by(order, SQLMovie.id)
            .offset(movie_filter.offset)
            .limit(movie_filter.limit)
        )
        result = await self.session.execute(query)
        movies = [self._to_domain(sql_movie, genre_name) for sql_movie, genre_name in result.all()]

        count = await self.session.scalar(select(func.count()).select_from(SQLMovie).where(*conditions))
        return movies, count or 0

    async def create(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = SQLMovie(
            name=movie.name,
            description=movie.description,
            price=movie.price,
            location=movie.location,
            genre_id=movie.genre_id,
            published=movie.published,
            image_url=movie.image_url,
        )
        self.session.add(sql_movie)
        await self._commit(movie.name)
        await self.session.refresh(sql_movie)
        return await self.get_by_id(sql_movie.id)

    async def update(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie.id))
        if not sql_movie:
            raise RecordNotFoundError(f"Movie with id {movie.id} not found")

        sql_movie.name = movie.name
        sql_movie.description = movie.description
        sql_movie.price = movie.price
        sql_movie.location = movie.location
        sql_movie.genre_id = movie.genre_id
        sql_movie.published = movie.published
        sql_movie.image_url = movie.image_url

        await self._commit(movie.name)
        await self.session.refresh(sql_movie)
        return await self.get_by_id(sql_movie.id)

    async def update_rating(self, movie_id: int, rating: float) -> None:
        sql_movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie_id))
        if not sql_movie:
            raise RecordNotFoundError(f"Movie with id {movie_id} not found")

        sql_movie.rating = rating
        await self.session.commit()

    async def delete(self, movie_id: int) -> DomainMovie:
        movie = await self.get_by_id(movie_id)
        if not movie:
            raise RecordNotFoundError(f"Movie with id {movie_id} not found")

        await self.session.execute(delete(SQLReview).where(SQLReview.movie_id == movie_id))
        await self.session.execute(delete(SQLMovie).where(SQLMovie.id == movie_id))
        await self.session.commit()
        return movie

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.exceptions import ConstraintViolationError, RecordNotFoundError
from movie_catalog.domain.models.genre import Genre as DomainGenre
from movie_catalog.domain.ports.repositories.genre_repository import GenreRepository
from movie_catalog.infrastructure.persistence.models import Genre as SQLGenre


class SQLAlchemyGenreRepository(GenreRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_genre: SQLGenre) -> DomainGenre:
        return DomainGenre(id=sql_genre.id, name=sql_genre.name)

    async def get_by_id(self, genre_id: int) -> Optional[DomainGenre]:
        genre = await self.session.scalar(select(SQLGenre).where(SQLGenre.id == genre_id))
        return self._to_domain(genre) if genre else None

    async def get_by_name(self, name: str) -> Optional[DomainGenre]:
        genre = await self.session.scalar(select(SQLGenre).where(SQLGenre.name == name))
        return self._to_domain(genre) if genre else None

    async def get_all(self) -> List[DomainGenre]:
        genres = await self.session.scalars(select(SQLGenre).order_by(SQLGenre.id))
        return [self._to_domain(genre) for genre in genres.all()]

    async def create(self, genre: DomainGenre) -> DomainGenre:
        sql_genre = SQLGenre(name=genre.name)
        self.session.add(sql_genre)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConstraintViolationError(f"Genre '{genre.name}' violates a constraint") from e

        await self.session.refresh(sql_genre)
        return self._to_domain(sql_genre)

    async def delete(self, genre_id: int) -> DomainGenre:
        genre = await self.session.scalar(select(SQLGenre).where(SQLGenre.id == genre_id))
        if not genre:
            raise RecordNotFoundError(f"Genre with id {genre_id} not found")

        deleted = self._to_domain(genre)
        await self.session.delete(genre)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConstraintViolationError(f"Genre with id {genre_id} is still referenced") from e
        return deleted

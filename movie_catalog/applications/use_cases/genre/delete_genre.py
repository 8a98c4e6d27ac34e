from movie_catalog.applications.interfaces.dtos.genre import GenrePublic
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.domain.exceptions import ConflictError, ConstraintViolationError, NotFoundError, RecordNotFoundError
from movie_catalog.domain.ports.repositories.genre_repository import GenreRepository


class DeleteGenreUseCase:
    def __init__(self, genre_repository: GenreRepository):
        self.genre_repository = genre_repository

    async def execute(self, genre_id: int) -> GenrePublic:
        if not await self.genre_repository.get_by_id(genre_id):
            raise NotFoundError(f"Genre with id {genre_id} not found")

        try:
            deleted = await self.genre_repository.delete(genre_id)
        except RecordNotFoundError as e:
            raise NotFoundError(f"Genre with id {genre_id} not found") from e
        except ConstraintViolationError as e:
            raise ConflictError(f"Genre with id {genre_id} is still used by movies") from e

        return CatalogDtoMapper.to_genre_public(deleted)

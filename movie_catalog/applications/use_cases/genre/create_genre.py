from movie_catalog.applications.interfaces.dtos.genre import GenrePublic, GenreSchema
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.domain.exceptions import ConflictError, ConstraintViolationError
from movie_catalog.domain.models.genre import Genre
from movie_catalog.domain.ports.repositories.genre_repository import GenreRepository
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateGenreUseCase:
    def __init__(self, genre_repository: GenreRepository):
        self.genre_repository = genre_repository

    async def execute(self, genre_data: GenreSchema) -> GenrePublic:
        logger.info(f"Create genre: {genre_data.name}")

        if await self.genre_repository.get_by_name(genre_data.name):
            logger.error(f"Failed to create genre. Genre already exists: {genre_data.name}")
            raise ConflictError(f"Genre '{genre_data.name}' already exists")

        try:
            genre = await self.genre_repository.create(Genre(name=genre_data.name))
        except ConstraintViolationError as e:
            logger.error(f"Failed to create genre: {e}")
            raise ConflictError(f"Genre '{genre_data.name}' already exists") from e

        return CatalogDtoMapper.to_genre_public(genre)

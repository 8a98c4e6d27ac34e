from movie_catalog.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.domain.exceptions import BadRequestError, ConflictError, ConstraintViolationError
from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.ports.repositories.genre_repository import GenreRepository
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, genre_repository: GenreRepository):
        self.movie_repository = movie_repository
        self.genre_repository = genre_repository

    async def execute(self, movie_data: MovieSchema) -> MoviePublic:
        logger.info(f"Create movie: {movie_data.name}")

        if await self.movie_repository.get_by_name(movie_data.name):
            logger.error(f"Create movie failed. Movie already exists: {movie_data.name}")
            raise ConflictError(f"Movie with name '{movie_data.name}' already exists")

        if not await self.genre_repository.get_by_id(movie_data.genre_id):
            logger.error(f"Create movie failed. Unknown genre: {movie_data.genre_id}")
            raise BadRequestError(f"Genre with id {movie_data.genre_id} does not exist")

        movie = Movie(**movie_data.model_dump())
        try:
            created_movie = await self.movie_repository.create(movie)
        except ConstraintViolationError as e:
            logger.error(f"Failed to create movie: {e}")
            raise BadRequestError("Invalid movie data") from e

        logger.info(f"Created movie: id={created_movie.id}")
        return CatalogDtoMapper.to_movie_public(created_movie)

from movie_catalog.applications.interfaces.dtos.movie import MoviePublic, MovieUpdateSchema
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.domain.exceptions import (
    BadRequestError,
    ConflictError,
    ConstraintViolationError,
    NotFoundError,
    RecordNotFoundError,
)
from movie_catalog.domain.ports.repositories.genre_repository import GenreRepository
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class UpdateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, genre_repository: GenreRepository):
        self.movie_repository = movie_repository
        self.genre_repository = genre_repository

    async def execute(self, movie_id: int, movie_data: MovieUpdateSchema) -> MoviePublic:
        existing_movie = await self.movie_repository.get_by_id(movie_id)
        if not existing_movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        changes = movie_data.model_dump(exclude_unset=True)

        if "name" in changes:
            name_conflict = await self.movie_repository.get_by_name(changes["name"])
            if name_conflict and name_conflict.id != movie_id:
                raise ConflictError(f"Movie with name '{changes['name']}' already exists")

        if "genre_id" in changes and not await self.genre_repository.get_by_id(changes["genre_id"]):
            raise BadRequestError(f"Genre with id {changes['genre_id']} does not exist")

        try:
            result = await self.movie_repository.update(existing_movie.model_copy(update=changes))
        except RecordNotFoundError as e:
            raise NotFoundError(f"Movie with id {movie_id} not found") from e
        except ConstraintViolationError as e:
            raise BadRequestError("Invalid movie data") from e

        return CatalogDtoMapper.to_movie_public(result)

from movie_catalog.applications.interfaces.dtos.movie import MoviePublic
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.domain.exceptions import NotFoundError, RecordNotFoundError
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class DeleteMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int) -> MoviePublic:
        existing_movie = await self.movie_repository.get_by_id(movie_id)
        if not existing_movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        try:
            deleted = await self.movie_repository.delete(movie_id)
        except RecordNotFoundError as e:
            raise NotFoundError(f"Movie with id {movie_id} not found") from e

        return CatalogDtoMapper.to_movie_public(deleted)

from movie_catalog.applications.interfaces.dtos.movie import MovieDetailPublic
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.domain.exceptions import NotFoundError
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.repositories.review_repository import ReviewRepository


class GetMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, review_repository: ReviewRepository):
        self.movie_repository = movie_repository
        self.review_repository = review_repository

    async def execute(self, movie_id: int) -> MovieDetailPublic:
        movie = await self.movie_repository.get_by_id(movie_id)
        if not movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        movie.reviews = await self.review_repository.get_by_movie_id(movie_id)
        return CatalogDtoMapper.to_movie_detail_public(movie)

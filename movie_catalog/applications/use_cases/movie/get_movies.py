import math

from movie_catalog.applications.interfaces.dtos.movie import MovieList, MovieQuery
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.domain.exceptions import BadRequestError
from movie_catalog.domain.models.movie import MovieFilter
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class GetMoviesUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, query: MovieQuery) -> MovieList:
        if query.min_price >= query.max_price:
            raise BadRequestError("min_price must be less than max_price")

        movie_filter = MovieFilter(
            offset=(query.page - 1) * query.page_size,
            limit=query.page_size,
            min_price=query.min_price,
            max_price=query.max_price,
            locations=query.locations,
            published=query.published,
            genre_id=query.genre_id,
            newest_first=query.created_at == "desc",
        )
        movies, count = await self.movie_repository.find_all(movie_filter)

        return MovieList(
            movies=[CatalogDtoMapper.to_movie_public(movie) for movie in movies],
            count=count,
            page=query.page,
            page_size=query.page_size,
            page_count=math.ceil(count / query.page_size),
        )

from movie_catalog.applications.interfaces.dtos.genre import GenrePublic
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.domain.exceptions import NotFoundError
from movie_catalog.domain.ports.repositories.genre_repository import GenreRepository


class GetGenreUseCase:
    def __init__(self, genre_repository: GenreRepository):
        self.genre_repository = genre_repository

    async def execute(self, genre_id: int) -> GenrePublic:
        genre = await self.genre_repository.get_by_id(genre_id)
        if not genre:
            raise NotFoundError(f"Genre with id {genre_id} not found")

        return CatalogDtoMapper.to_genre_public(genre)

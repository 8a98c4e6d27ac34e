from typing import List

from movie_catalog.applications.interfaces.dtos.genre import GenrePublic
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.domain.ports.repositories.genre_repository import GenreRepository


class GetGenresUseCase:
    def __init__(self, genre_repository: GenreRepository):
        self.genre_repository = genre_repository

    async def execute(self) -> List[GenrePublic]:
        genres = await self.genre_repository.get_all()
        return [CatalogDtoMapper.to_genre_public(genre) for genre in genres]

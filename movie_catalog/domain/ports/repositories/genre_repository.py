from abc import ABC, abstractmethod
from typing import List, Optional

from movie_catalog.domain.models.genre import Genre


class GenreRepository(ABC):
    @abstractmethod
    async def get_by_id(self, genre_id: int) -> Optional[Genre]:
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Genre]:
        pass

    @abstractmethod
    async def get_all(self) -> List[Genre]:
        pass

    @abstractmethod
    async def create(self, genre: Genre) -> Genre:
        pass

    @abstractmethod
    async def delete(self, genre_id: int) -> Genre:
        pass

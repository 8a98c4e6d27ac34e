from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from movie_catalog.domain.models.movie import Movie, MovieFilter


class MovieRepository(ABC):
    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Movie]:
        pass

    @abstractmethod
    async def find_all(self, movie_filter: MovieFilter) -> Tuple[List[Movie], int]:
        """Return one page of matching movies and the total number of matches"""

    @abstractmethod
    async def create(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def update(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def update_rating(self, movie_id: int, rating: float) -> None:
        pass

    @abstractmethod
    async def delete(self, movie_id: int) -> Movie:
        pass

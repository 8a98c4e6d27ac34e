import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from movie_catalog.domain.models.review import Review


class ReviewRepository(ABC):
    """Reviews keyed by (user_id, movie_id).

    Mutations raise RecordNotFoundError when the keyed row is absent and
    ConstraintViolationError when the store rejects the row.
    """

    @abstractmethod
    async def get(self, user_id: uuid.UUID, movie_id: int) -> Optional[Review]:
        pass

    @abstractmethod
    async def get_by_movie_id(self, movie_id: int) -> List[Review]:
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: uuid.UUID) -> List[Review]:
        pass

    @abstractmethod
    async def create(self, review: Review) -> Review:
        pass

    @abstractmethod
    async def update(self, review: Review) -> Review:
        pass

    @abstractmethod
    async def delete(self, user_id: uuid.UUID, movie_id: int) -> Review:
        pass

import uuid
from typing import FrozenSet

from pydantic import BaseModel, ConfigDict

from movie_catalog.domain.models.role import Role
from movie_catalog.domain.models.user import User


class Actor(BaseModel):
    """The authenticated caller of a request"""

    id: uuid.UUID
    email: str
    roles: FrozenSet[Role]
    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_user(cls, user: User) -> "Actor":
        return cls(id=user.id, email=user.email, roles=frozenset(user.roles))

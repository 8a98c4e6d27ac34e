import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from movie_catalog.domain.models.role import Role


class User(BaseModel):
    email: str
    full_name: str
    password_hash: str = ""
    roles: List[Role] = Field(default_factory=lambda: [Role.USER])
    verified: bool = False
    id: Optional[uuid.UUID] = None
    created_at: Optional[datetime] = None

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Review(BaseModel):
    user_id: uuid.UUID
    movie_id: int
    rating: int
    text: str
    hidden: bool = False
    created_at: Optional[datetime] = None
    reviewer_name: Optional[str] = None

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ReviewSchema(BaseModel):
    rating: int = Field(ge=1, le=5)
    text: str = Field(min_length=1)


class ReviewerPublic(BaseModel):
    full_name: Optional[str] = None


class ReviewPublic(BaseModel):
    user_id: uuid.UUID
    rating: int
    text: str
    hidden: bool
    created_at: Optional[datetime] = None
    user: ReviewerPublic
    model_config = ConfigDict(from_attributes=True)

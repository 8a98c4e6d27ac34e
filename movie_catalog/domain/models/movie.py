from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from movie_catalog.domain.models.location import Location
from movie_catalog.domain.models.review import Review


class Movie(BaseModel):
    name: str
    description: str
    price: float
    location: Location
    genre_id: int
    published: bool = True
    image_url: Optional[str] = None
    rating: float = 0
    id: Optional[int] = None
    genre_name: Optional[str] = None
    created_at: Optional[datetime] = None
    reviews: List[Review] = Field(default_factory=list)


class MovieFilter(BaseModel):
    """Criteria for listing the catalog, already validated by the presentation layer"""

    offset: int = 0
    limit: int = 10
    min_price: float = 0
    max_price: float = 1000
    locations: List[Location] = Field(default_factory=list)
    published: bool = True
    genre_id: Optional[int] = None
    newest_first: bool = False

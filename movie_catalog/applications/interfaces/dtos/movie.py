from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from movie_catalog.applications.interfaces.dtos.review import ReviewPublic
from movie_catalog.domain.models.location import Location


class MovieSchema(BaseModel):
    name: str = Field(min_length=1)
    description: str
    price: float = Field(ge=0)
    location: Location
    published: bool
    genre_id: int = Field(ge=1)
    image_url: Optional[str] = None


class MovieUpdateSchema(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=1)
    location: Optional[Location] = None
    published: Optional[bool] = None
    genre_id: Optional[int] = Field(default=None, ge=1)
    image_url: Optional[str] = None


class MovieGenrePublic(BaseModel):
    name: Optional[str] = None


class MoviePublic(BaseModel):
    id: int
    name: str
    description: str
    price: float
    location: Location
    published: bool
    genre_id: int
    image_url: Optional[str] = None
    rating: float
    created_at: Optional[datetime] = None
    genre: MovieGenrePublic
    model_config = ConfigDict(from_attributes=True)


class MovieDetailPublic(MoviePublic):
    reviews: List[ReviewPublic]


class MovieQuery(BaseModel):
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=20)
    min_price: float = Field(default=0, ge=0)
    max_price: float = 1000
    locations: List[Location] = Field(default_factory=list)
    published: bool = True
    genre_id: Optional[int] = Field(default=None, ge=1)
    created_at: Literal["asc", "desc"] = "asc"

    @field_validator("locations", mode="before")
    @classmethod
    def split_locations(cls, value):
        if isinstance(value, str):
            value = [value]
        if isinstance(value, list):
            return [item.strip() for raw in value for item in str(raw).split(",") if item.strip()]
        return value


class MovieList(BaseModel):
    movies: List[MoviePublic]
    count: int
    page: int
    page_size: int
    page_count: int

import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, CheckConstraint, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, registry

from movie_catalog.domain.models.location import Location

table_registry = registry()


@table_registry.mapped_as_dataclass
class User:
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(init=False, primary_key=True, insert_default=uuid.uuid4)
    email: Mapped[str] = mapped_column(unique=True)
    full_name: Mapped[str]
    password: Mapped[str]
    roles: Mapped[List[str]] = mapped_column(JSON, default_factory=lambda: ["USER"])
    verified: Mapped[bool] = mapped_column(default=False)

    created_at: Mapped[datetime] = mapped_column(init=False, server_default=func.now())


@table_registry.mapped_as_dataclass
class Genre:
    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    name: Mapped[str] = mapped_column(unique=True)


@table_registry.mapped_as_dataclass
class Movie:
    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    name: Mapped[str] = mapped_column(unique=True)
    description: Mapped[str]
    price: Mapped[float]
    location: Mapped[Location]
    genre_id: Mapped[int] = mapped_column(ForeignKey("genres.id"))
    published: Mapped[bool] = mapped_column(default=True)
    image_url: Mapped[Optional[str]] = mapped_column(default=None)
    rating: Mapped[float] = mapped_column(default=0.0)

    created_at: Mapped[datetime] = mapped_column(init=False, server_default=func.now())


@table_registry.mapped_as_dataclass
class Review:
    __tablename__ = "reviews"
    __table_args__ = (CheckConstraint("rating >= 1 AND rating <= 5", name="review_rating_range"),)

    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    movie_id: Mapped[int] = mapped_column(ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True)
    rating: Mapped[int]
    text: Mapped[str]
    hidden: Mapped[bool] = mapped_column(default=False)

    created_at: Mapped[datetime] = mapped_column(init=False, server_default=func.now())

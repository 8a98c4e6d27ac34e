from typing import List

from movie_catalog.applications.interfaces.dtos.genre import GenrePublic
from movie_catalog.applications.interfaces.dtos.movie import MovieDetailPublic, MovieGenrePublic, MoviePublic
from movie_catalog.applications.interfaces.dtos.review import ReviewerPublic, ReviewPublic
from movie_catalog.applications.interfaces.dtos.user import UserPublic
from movie_catalog.domain.models.genre import Genre
from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.models.review import Review
from movie_catalog.domain.models.user import User


class CatalogDtoMapper:
    """Maps domain models to the public DTOs served by the API"""

    @staticmethod
    def to_review_public(review: Review) -> ReviewPublic:
        return ReviewPublic(
            user_id=review.user_id,
            rating=review.rating,
            text=review.text,
            hidden=review.hidden,
            created_at=review.created_at,
            user=ReviewerPublic(full_name=review.reviewer_name),
        )

    @staticmethod
    def to_review_publics(reviews: List[Review]) -> List[ReviewPublic]:
        return [CatalogDtoMapper.to_review_public(review) for review in reviews]

    @staticmethod
    def _movie_fields(movie: Movie) -> dict:
        return {
            "id": movie.id,
            "name": movie.name,
            "description": movie.description,
            "price": movie.price,
            "location": movie.location,
            "published": movie.published,
            "genre_id": movie.genre_id,
            "image_url": movie.image_url,
            "rating": movie.rating,
            "created_at": movie.created_at,
            "genre": MovieGenrePublic(name=movie.genre_name),
        }

    @staticmethod
    def to_movie_public(movie: Movie) -> MoviePublic:
        return MoviePublic(**CatalogDtoMapper._movie_fields(movie))

    @staticmethod
    def to_movie_detail_public(movie: Movie) -> MovieDetailPublic:
        return MovieDetailPublic(
            **CatalogDtoMapper._movie_fields(movie),
            reviews=CatalogDtoMapper.to_review_publics(movie.reviews),
        )

    @staticmethod
    def to_genre_public(genre: Genre) -> GenrePublic:
        return GenrePublic(id=genre.id, name=genre.name)

    @staticmethod
    def to_user_public(user: User) -> UserPublic:
        return UserPublic(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            roles=user.roles,
            verified=user.verified,
            created_at=user.created_at,
        )

import uuid

import pytest

from movie_catalog.domain.exceptions import ConstraintViolationError, RecordNotFoundError
from movie_catalog.domain.models.genre import Genre as DomainGenre
from movie_catalog.domain.models.location import Location
from movie_catalog.domain.models.movie import Movie as DomainMovie
from movie_catalog.domain.models.movie import MovieFilter
from movie_catalog.domain.models.review import Review as DomainReview
from movie_catalog.domain.models.role import Role
from movie_catalog.domain.models.user import User as DomainUser
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_genre_repository import (
    SQLAlchemyGenreRepository,
)
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_review_repository import (
    SQLAlchemyReviewRepository,
)
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_user_repository import (
    SQLAlchemyUserRepository,
)
from movie_catalog.infrastructure.persistence.models import User as SQLUser
from tests.conftest import BaseIntegrationTest


class TestSQLAlchemyUserRepository(BaseIntegrationTest):
    """Integration tests for SQLAlchemy user repository"""

    @pytest.fixture
    def user_repository(self, test_session):
        """Create repository instance"""
        return SQLAlchemyUserRepository(test_session)

    @pytest.mark.asyncio
    async def test_create_user(self, user_repository):
        domain_user = DomainUser(email="create@example.com", full_name="Created", password_hash="hash")

        created_user = await user_repository.create(domain_user)

        assert created_user.id is not None
        assert created_user.roles == [Role.USER]
        assert created_user.verified is False
        assert created_user.created_at is not None

    @pytest.mark.asyncio
    async def test_ids_generated_on_insert(self, user_repository):
        first = await user_repository.create(DomainUser(email="first@example.com", full_name="A", password_hash="h"))
        second = await user_repository.create(DomainUser(email="second@example.com", full_name="B", password_hash="h"))

        assert isinstance(first.id, uuid.UUID)
        assert isinstance(second.id, uuid.UUID)
        assert first.id != second.id
        assert SQLUser.__table__.c.id.default is not None

    @pytest.mark.asyncio
    async def test_duplicate_email(self, user_repository):
        await user_repository.create(DomainUser(email="dup@example.com", full_name="First", password_hash="hash"))

        with pytest.raises(ConstraintViolationError):
            await user_repository.create(DomainUser(email="dup@example.com", full_name="Second", password_hash="h"))

    @pytest.mark.asyncio
    async def test_update_roles(self, user_repository):
        created = await user_repository.create(
            DomainUser(email="roles@example.com", full_name="Roles", password_hash="hash")
        )

        updated = await user_repository.update(created.model_copy(update={"roles": [Role.USER, Role.ADMIN]}))

        assert updated.roles == [Role.USER, Role.ADMIN]
        found = await user_repository.get_by_email("roles@example.com")
        assert found.roles == [Role.USER, Role.ADMIN]

    @pytest.mark.asyncio
    async def test_delete_removes_user_reviews(self, user_repository, test_session, user, movie):
        review_repository = SQLAlchemyReviewRepository(test_session)
        await review_repository.create(DomainReview(user_id=user.id, movie_id=movie.id, rating=3, text="Ok"))

        assert await user_repository.delete(user.id) is True

        assert await user_repository.get_by_id(user.id) is None
        assert await review_repository.get_by_movie_id(movie.id) == []

    @pytest.mark.asyncio
    async def test_delete_missing_user(self, user_repository, user):
        await user_repository.delete(user.id)

        assert await user_repository.delete(user.id) is False


class TestSQLAlchemyMovieRepository(BaseIntegrationTest):
    """Integration tests for SQLAlchemy movie and genre repositories"""

    @pytest.fixture
    def movie_repository(self, test_session):
        return SQLAlchemyMovieRepository(test_session)

    @pytest.mark.asyncio
    async def test_create_movie_with_genre_name(self, movie_repository, genre):
        movie = DomainMovie(
            name="Stalker", description="The Zone", price=250.0, location=Location.SPB, genre_id=genre.id
        )

        created = await movie_repository.create(movie)

        assert created.id is not None
        assert created.genre_name == "Drama"
        assert created.rating == 0
        assert created.location == Location.SPB

    @pytest.mark.asyncio
    async def test_duplicate_name(self, movie_repository, movie, genre):
        duplicate = DomainMovie(
            name=movie.name, description="Copy", price=1.0, location=Location.MSK, genre_id=genre.id
        )

        with pytest.raises(ConstraintViolationError):
            await movie_repository.create(duplicate)

    @pytest.mark.asyncio
    async def test_find_all_filters(self, movie_repository, movie, genre):
        # Arrange
        for name, price, location, published in [
            ("Mirror", 100.0, Location.SPB, True),
            ("Nostalghia", 700.0, Location.SPB, True),
            ("Ivan's Childhood", 150.0, Location.SPB, False),
        ]:
            await movie_repository.create(
                DomainMovie(
                    name=name,
                    description=name,
                    price=price,
                    location=location,
                    genre_id=genre.id,
                    published=published,
                )
            )

        # Act
        spb_movies, spb_count = await movie_repository.find_all(MovieFilter(locations=[Location.SPB]))
        cheap_movies, cheap_count = await movie_repository.find_all(MovieFilter(max_price=350))
        hidden_movies, _ = await movie_repository.find_all(MovieFilter(published=False))
        first_page, total = await movie_repository.find_all(MovieFilter(limit=1))

        # Assert
        assert spb_count == 2
        assert {m.name for m in spb_movies} == {"Mirror", "Nostalghia"}
        assert cheap_count == 2
        assert {m.name for m in cheap_movies} == {"Solaris", "Mirror"}
        assert [m.name for m in hidden_movies] == ["Ivan's Childhood"]
        assert len(first_page) == 1
        assert total == 3

    @pytest.mark.asyncio
    async def test_update_rating(self, movie_repository, movie):
        await movie_repository.update_rating(movie.id, 4.7)

        found = await movie_repository.get_by_id(movie.id)
        assert found.rating == 4.7

    @pytest.mark.asyncio
    async def test_update_rating_missing_movie(self, movie_repository):
        with pytest.raises(RecordNotFoundError):
            await movie_repository.update_rating(999, 1.0)

    @pytest.mark.asyncio
    async def test_delete_movie_with_reviews(self, movie_repository, test_session, movie, user):
        review_repository = SQLAlchemyReviewRepository(test_session)
        await review_repository.create(DomainReview(user_id=user.id, movie_id=movie.id, rating=5, text="Great"))

        deleted = await movie_repository.delete(movie.id)

        assert deleted.name == "Solaris"
        assert await movie_repository.get_by_id(movie.id) is None
        assert await review_repository.get(user.id, movie.id) is None

    @pytest.mark.asyncio
    async def test_genres(self, test_session):
        genre_repository = SQLAlchemyGenreRepository(test_session)

        created = await genre_repository.create(DomainGenre(name="Comedy"))
        with pytest.raises(ConstraintViolationError):
            await genre_repository.create(DomainGenre(name="Comedy"))

        assert [g.name for g in await genre_repository.get_all()] == ["Comedy"]
        assert (await genre_repository.delete(created.id)).name == "Comedy"
        with pytest.raises(RecordNotFoundError):
            await genre_repository.delete(created.id)


class TestSQLAlchemyReviewRepository(BaseIntegrationTest):
    """Integration tests for SQLAlchemy review repository"""

    @pytest.fixture
    def review_repository(self, test_session):
        return SQLAlchemyReviewRepository(test_session)

    @pytest.mark.asyncio
    async def test_create_review_with_reviewer_name(self, review_repository, user, movie):
        created = await review_repository.create(
            DomainReview(user_id=user.id, movie_id=movie.id, rating=4, text="Slow but deep")
        )

        assert created.reviewer_name == "Anna Reviewer"
        assert created.hidden is False
        assert created.created_at is not None

    @pytest.mark.asyncio
    async def test_one_review_per_user_and_movie(self, review_repository, user, movie):
        # the rollback expires ORM instances, keep plain ids
        user_id, movie_id = user.id, movie.id
        await review_repository.create(DomainReview(user_id=user_id, movie_id=movie_id, rating=4, text="First"))

        with pytest.raises(ConstraintViolationError):
            await review_repository.create(DomainReview(user_id=user_id, movie_id=movie_id, rating=2, text="Second"))

        reviews = await review_repository.get_by_movie_id(movie_id)
        assert len(reviews) == 1
        assert reviews[0].text == "First"

    @pytest.mark.asyncio
    async def test_rating_out_of_range_rejected(self, review_repository, user, movie):
        with pytest.raises(ConstraintViolationError):
            await review_repository.create(DomainReview(user_id=user.id, movie_id=movie.id, rating=6, text="Wow"))

    @pytest.mark.asyncio
    async def test_update_and_hide(self, review_repository, user, movie):
        created = await review_repository.create(
            DomainReview(user_id=user.id, movie_id=movie.id, rating=2, text="Meh")
        )

        updated = await review_repository.update(created.model_copy(update={"rating": 5, "hidden": True}))

        assert updated.rating == 5
        assert updated.hidden is True
        assert updated.reviewer_name == "Anna Reviewer"

    @pytest.mark.asyncio
    async def test_update_missing_review(self, review_repository, user, movie):
        with pytest.raises(RecordNotFoundError):
            await review_repository.update(DomainReview(user_id=user.id, movie_id=movie.id, rating=3, text="x"))

    @pytest.mark.asyncio
    async def test_delete_returns_deleted_review(self, review_repository, user, other_user, movie):
        await review_repository.create(DomainReview(user_id=user.id, movie_id=movie.id, rating=5, text="A"))
        await review_repository.create(DomainReview(user_id=other_user.id, movie_id=movie.id, rating=1, text="B"))

        deleted = await review_repository.delete(other_user.id, movie.id)

        assert deleted.text == "B"
        assert deleted.reviewer_name == "Boris Other"
        remaining = await review_repository.get_by_movie_id(movie.id)
        assert [r.user_id for r in remaining] == [user.id]
        assert [r.movie_id for r in await review_repository.get_by_user_id(user.id)] == [movie.id]

from http import HTTPStatus
from typing import Annotated, Callable

from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.applications.services.review_aggregation_service import ReviewAggregationService
from movie_catalog.domain.models.actor import Actor
from movie_catalog.domain.models.role import Role
from movie_catalog.domain.ports.repositories.genre_repository import GenreRepository
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.repositories.review_repository import ReviewRepository
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.services.authorization import has_required_role
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
from movie_catalog.infrastructure.adapters.services.jwt_auth_service import JWTAuthService
from movie_catalog.infrastructure.config.settings import Settings
from movie_catalog.infrastructure.logging.logger import StdLoggerAdapter
from movie_catalog.infrastructure.persistence.database import get_session

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("movie_catalog.reviews")


def get_settings() -> Settings:
    return Settings()


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    return SQLAlchemyUserRepository(session)


def get_movie_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> MovieRepository:
    return SQLAlchemyMovieRepository(session)


def get_genre_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> GenreRepository:
    return SQLAlchemyGenreRepository(session)


def get_review_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> ReviewRepository:
    return SQLAlchemyReviewRepository(session)


def get_auth_service(
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    return JWTAuthService(user_repository, settings)


def get_review_service(
    movie_repository: Annotated[MovieRepository, Depends(get_movie_repository)],
    review_repository: Annotated[ReviewRepository, Depends(get_review_repository)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> ReviewAggregationService:
    return ReviewAggregationService(
        movie_repository=movie_repository,
        review_repository=review_repository,
        logger=logger,
    )


async def get_current_actor(
    token: Annotated[str, Depends(oauth2_scheme)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> Actor:
    user = await auth_service.get_current_user(token)
    if not user:
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Actor.from_user(user)


def require_role(role: Role) -> Callable:
    """Dependency admitting actors that hold `role` or a role above it"""

    async def check_role(actor: Annotated[Actor, Depends(get_current_actor)]) -> Actor:
        if not has_required_role(actor.roles, role):
            raise HTTPException(status_code=HTTPStatus.FORBIDDEN, detail="Not enough permissions")
        return actor

    return check_role

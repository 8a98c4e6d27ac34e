from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from movie_catalog.applications.interfaces.dtos.movie import (
    MovieDetailPublic,
    MovieList,
    MoviePublic,
    MovieQuery,
    MovieSchema,
    MovieUpdateSchema,
)
from movie_catalog.applications.use_cases.movie.create_movie import CreateMovieUseCase
from movie_catalog.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movie import GetMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movies import GetMoviesUseCase
from movie_catalog.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from movie_catalog.domain.exceptions import DomainError
from movie_catalog.domain.models.actor import Actor
from movie_catalog.domain.models.role import Role
from movie_catalog.domain.ports.repositories.genre_repository import GenreRepository
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.repositories.review_repository import ReviewRepository
from movie_catalog.infrastructure.config.dependencies import (
    get_genre_repository,
    get_movie_repository,
    get_review_repository,
    require_role,
)
from movie_catalog.presentation.routers.errors import to_http_exception

router = APIRouter(prefix="/movies", tags=["movies"])

MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]
GenreRepositoryDep = Annotated[GenreRepository, Depends(get_genre_repository)]
ReviewRepositoryDep = Annotated[ReviewRepository, Depends(get_review_repository)]
SuperAdminDep = Annotated[Actor, Depends(require_role(Role.SUPER_ADMIN))]


@router.get("/", response_model=MovieList)
async def read_movies(query: Annotated[MovieQuery, Query()], movie_repository: MovieRepositoryDep):
    try:
        use_case = GetMoviesUseCase(movie_repository)
        return await use_case.execute(query)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{movie_id}", response_model=MovieDetailPublic)
async def read_movie(movie_id: int, movie_repository: MovieRepositoryDep, review_repository: ReviewRepositoryDep):
    try:
        use_case = GetMovieUseCase(movie_repository, review_repository)
        return await use_case.execute(movie_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/", status_code=HTTPStatus.CREATED, response_model=MoviePublic)
async def create_movie(
    movie: MovieSchema,
    movie_repository: MovieRepositoryDep,
    genre_repository: GenreRepositoryDep,
    _admin: SuperAdminDep,
):
    try:
        use_case = CreateMovieUseCase(movie_repository, genre_repository)
        return await use_case.execute(movie)
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{movie_id}", response_model=MoviePublic)
async def update_movie(
    movie_id: int,
    movie: MovieUpdateSchema,
    movie_repository: MovieRepositoryDep,
    genre_repository: GenreRepositoryDep,
    _admin: SuperAdminDep,
):
    try:
        use_case = UpdateMovieUseCase(movie_repository, genre_repository)
        return await use_case.execute(movie_id, movie)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{movie_id}", response_model=MoviePublic)
async def delete_movie(movie_id: int, movie_repository: MovieRepositoryDep, _admin: SuperAdminDep):
    try:
        use_case = DeleteMovieUseCase(movie_repository)
        return await use_case.execute(movie_id)
    except DomainError as e:
        raise to_http_exception(e)

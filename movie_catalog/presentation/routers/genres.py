from http import HTTPStatus
from typing import Annotated, List

from fastapi import APIRouter, Depends

from movie_catalog.applications.interfaces.dtos.genre import GenrePublic, GenreSchema
from movie_catalog.applications.use_cases.genre.create_genre import CreateGenreUseCase
from movie_catalog.applications.use_cases.genre.delete_genre import DeleteGenreUseCase
from movie_catalog.applications.use_cases.genre.get_genre import GetGenreUseCase
from movie_catalog.applications.use_cases.genre.get_genres import GetGenresUseCase
from movie_catalog.domain.exceptions import DomainError
from movie_catalog.domain.models.actor import Actor
from movie_catalog.domain.models.role import Role
from movie_catalog.domain.ports.repositories.genre_repository import GenreRepository
from movie_catalog.infrastructure.config.dependencies import get_genre_repository, require_role
from movie_catalog.presentation.routers.errors import to_http_exception

router = APIRouter(prefix="/genres", tags=["genres"])

GenreRepositoryDep = Annotated[GenreRepository, Depends(get_genre_repository)]
SuperAdminDep = Annotated[Actor, Depends(require_role(Role.SUPER_ADMIN))]


@router.get("/", response_model=List[GenrePublic])
async def read_genres(genre_repository: GenreRepositoryDep):
    use_case = GetGenresUseCase(genre_repository)
    return await use_case.execute()


@router.get("/{genre_id}", response_model=GenrePublic)
async def read_genre(genre_id: int, genre_repository: GenreRepositoryDep):
    try:
        use_case = GetGenreUseCase(genre_repository)
        return await use_case.execute(genre_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/", status_code=HTTPStatus.CREATED, response_model=GenrePublic)
async def create_genre(genre: GenreSchema, genre_repository: GenreRepositoryDep, _admin: SuperAdminDep):
    try:
        use_case = CreateGenreUseCase(genre_repository)
        return await use_case.execute(genre)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{genre_id}", response_model=GenrePublic)
async def delete_genre(genre_id: int, genre_repository: GenreRepositoryDep, _admin: SuperAdminDep):
    try:
        use_case = DeleteGenreUseCase(genre_repository)
        return await use_case.execute(genre_id)
    except DomainError as e:
        raise to_http_exception(e)

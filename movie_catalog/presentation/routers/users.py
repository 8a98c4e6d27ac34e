import uuid
from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from movie_catalog.applications.interfaces.dtos.filter_page import FilterPage
from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.applications.interfaces.dtos.user import UserList, UserPublic, UserSchema, UserUpdateSchema
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.applications.services.review_aggregation_service import ReviewAggregationService
from movie_catalog.applications.use_cases.user.create_user import CreateUserUseCase
from movie_catalog.applications.use_cases.user.delete_user import DeleteUserUseCase
from movie_catalog.applications.use_cases.user.get_users import GetUsersUseCase
from movie_catalog.applications.use_cases.user.update_user import UpdateUserUseCase
from movie_catalog.domain.exceptions import DomainError
from movie_catalog.domain.models.actor import Actor
from movie_catalog.domain.models.role import Role
from movie_catalog.domain.ports.repositories.review_repository import ReviewRepository
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.infrastructure.config.dependencies import (
    get_auth_service,
    get_current_actor,
    get_review_repository,
    get_review_service,
    get_user_repository,
    require_role,
)
from movie_catalog.presentation.routers.errors import to_http_exception

router = APIRouter(prefix="/users", tags=["users"])

UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
ReviewRepositoryDep = Annotated[ReviewRepository, Depends(get_review_repository)]
ReviewServiceDep = Annotated[ReviewAggregationService, Depends(get_review_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CurrentActorDep = Annotated[Actor, Depends(get_current_actor)]
AdminDep = Annotated[Actor, Depends(require_role(Role.ADMIN))]


@router.post("/", status_code=HTTPStatus.CREATED, response_model=UserPublic)
async def create_user(user: UserSchema, user_repository: UserRepositoryDep, auth_service: AuthServiceDep):
    try:
        use_case = CreateUserUseCase(user_repository, auth_service)
        return await use_case.execute(user)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/me", response_model=UserPublic)
async def read_me(actor: CurrentActorDep, user_repository: UserRepositoryDep):
    user = await user_repository.get_by_id(actor.id)
    if not user:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="User not found")
    return CatalogDtoMapper.to_user_public(user)


@router.get("/", response_model=UserList)
async def read_users(
    filter_users: Annotated[FilterPage, Query()], user_repository: UserRepositoryDep, _admin: AdminDep
):
    use_case = GetUsersUseCase(user_repository)
    return await use_case.execute(filter_users)


@router.patch("/{user_id}", response_model=UserPublic)
async def update_user(
    user_id: uuid.UUID, user: UserUpdateSchema, user_repository: UserRepositoryDep, _admin: AdminDep
):
    try:
        use_case = UpdateUserUseCase(user_repository)
        return await use_case.execute(user_id, user)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{user_id}", response_model=Message)
async def delete_user(
    user_id: uuid.UUID,
    actor: CurrentActorDep,
    user_repository: UserRepositoryDep,
    review_repository: ReviewRepositoryDep,
    review_service: ReviewServiceDep,
):
    try:
        use_case = DeleteUserUseCase(user_repository, review_repository, review_service)
        return await use_case.execute(actor, user_id)
    except DomainError as e:
        raise to_http_exception(e)

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm

from movie_catalog.applications.interfaces.dtos.token import Token
from movie_catalog.applications.use_cases.user.authenticate_user import AuthenticateUserUseCase
from movie_catalog.domain.exceptions import DomainError
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.infrastructure.config.dependencies import get_auth_service, get_user_repository
from movie_catalog.presentation.routers.errors import to_http_exception

router = APIRouter(prefix="/auth", tags=["auth"])

OAuth2Form = Annotated[OAuth2PasswordRequestForm, Depends()]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post("/token", response_model=Token)
async def login_for_access_token(
    form_data: OAuth2Form, user_repository: UserRepositoryDep, auth_service: AuthServiceDep
):
    try:
        use_case = AuthenticateUserUseCase(user_repository, auth_service)
        return await use_case.execute(form_data.username, form_data.password)
    except DomainError as e:
        raise to_http_exception(e)

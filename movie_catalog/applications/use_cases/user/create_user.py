from movie_catalog.applications.interfaces.dtos.user import UserPublic, UserSchema
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.domain.exceptions import ConflictError, ConstraintViolationError
from movie_catalog.domain.models.role import Role
from movie_catalog.domain.models.user import User
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateUserUseCase:
    def __init__(self, user_repository: UserRepository, auth_service: AuthService):
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def execute(self, user_data: UserSchema) -> UserPublic:
        logger.info(f"Creating user: {user_data.email}")

        if await self.user_repository.get_by_email(user_data.email):
            raise ConflictError("A user with this email is already registered")

        user = User(
            email=user_data.email,
            full_name=user_data.full_name,
            password_hash=self.auth_service.hash_password(user_data.password),
            roles=[Role.USER],
        )

        try:
            created_user = await self.user_repository.create(user)
        except ConstraintViolationError as e:
            raise ConflictError("A user with this email is already registered") from e

        logger.info(f"User created successfully: {created_user.email}")

        return CatalogDtoMapper.to_user_public(created_user)

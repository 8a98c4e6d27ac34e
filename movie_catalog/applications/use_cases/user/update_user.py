import uuid

from movie_catalog.applications.interfaces.dtos.user import UserPublic, UserUpdateSchema
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.domain.exceptions import NotFoundError
from movie_catalog.domain.ports.repositories.user_repository import UserRepository


class UpdateUserUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: uuid.UUID, user_data: UserUpdateSchema) -> UserPublic:
        existing_user = await self.user_repository.get_by_id(user_id)
        if not existing_user:
            raise NotFoundError("User not found")

        changes = user_data.model_dump(exclude_unset=True, exclude_none=True)
        saved_user = await self.user_repository.update(existing_user.model_copy(update=changes))

        return CatalogDtoMapper.to_user_public(saved_user)

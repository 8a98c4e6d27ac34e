from movie_catalog.applications.interfaces.dtos.filter_page import FilterPage
from movie_catalog.applications.interfaces.dtos.user import UserList
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.domain.ports.repositories.user_repository import UserRepository


class GetUsersUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, filter_page: FilterPage) -> UserList:
        users = await self.user_repository.get_all(offset=filter_page.offset, limit=filter_page.limit)

        return UserList(users=[CatalogDtoMapper.to_user_public(user) for user in users])

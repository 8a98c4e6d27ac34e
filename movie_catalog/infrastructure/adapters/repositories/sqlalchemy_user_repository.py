import uuid
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.exceptions import ConstraintViolationError, RecordNotFoundError
from movie_catalog.domain.models.role import Role
from movie_catalog.domain.models.user import User as DomainUser
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.infrastructure.persistence.models import Review as SQLReview
from movie_catalog.infrastructure.persistence.models import User as SQLUser


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_user: SQLUser) -> DomainUser:
        return DomainUser(
            id=sql_user.id,
            email=sql_user.email,
            full_name=sql_user.full_name,
            password_hash=sql_user.password,
            roles=[Role(role) for role in sql_user.roles],
            verified=sql_user.verified,
            created_at=sql_user.created_at,
        )

    async def create(self, user: DomainUser) -> DomainUser:
        sql_user = SQLUser(
            email=user.email,
            full_name=user.full_name,
            password=user.password_hash,
            roles=[role.value for role in user.roles],
            verified=user.verified,
        )
        self.session.add(sql_user)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConstraintViolationError(f"User with email {user.email} violates a constraint") from e

        await self.session.refresh(sql_user)
        return self._to_domain(sql_user)

    async def get_by_id(self, user_id: uuid.UUID) -> Optional[DomainUser]:
        sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.id == user_id))
        return self._to_domain(sql_user) if sql_user else None

    async def get_by_email(self, email: str) -> Optional[DomainUser]:
        sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.email == email))
        return self._to_domain(sql_user) if sql_user else None

    async def get_all(self, offset: int = 0, limit: int = 100) -> List[DomainUser]:
        query = await self.session.scalars(select(SQLUser).order_by(SQLUser.created_at).offset(offset).limit(limit))
        return [self._to_domain(sql_user) for sql_user in query.all()]

    async def update(self, user: DomainUser) -> DomainUser:
        sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.id == user.id))
        if not sql_user:
            raise RecordNotFoundError(f"User with id {user.id} not found")

        sql_user.email = user.email
        sql_user.full_name = user.full_name
        sql_user.password = user.password_hash
        sql_user.roles = [role.value for role in user.roles]
        sql_user.verified = user.verified

        await self.session.commit()
        await self.session.refresh(sql_user)
        return self._to_domain(sql_user)

    async def delete(self, user_id: uuid.UUID) -> bool:
        sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.id == user_id))
        if not sql_user:
            return False

        await self.session.execute(delete(SQLReview).where(SQLReview.user_id == user_id))
        await self.session.delete(sql_user)
        await self.session.commit()
        return True

from datetime import datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from jwt import InvalidTokenError, decode, encode
from pwdlib import PasswordHash

from movie_catalog.domain.models.user import User as DomainUser
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.infrastructure.config.settings import Settings


class JWTAuthService(AuthService):
    def __init__(self, user_repository: UserRepository, settings: Settings):
        self.user_repository = user_repository
        self.settings = settings
        self.pwd_context = PasswordHash.recommended()

    def hash_password(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return self.pwd_context.verify(plain_password, hashed_password)

    def create_access_token(self, user: DomainUser) -> str:
        expire = datetime.now(tz=ZoneInfo("UTC")) + timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        to_encode = {"sub": user.email, "exp": expire}
        encoded_jwt = encode(to_encode, self.settings.SECRET_KEY, algorithm=self.settings.ALGORITHM)
        return encoded_jwt

    async def get_current_user(self, token: str) -> Optional[DomainUser]:
        try:
            payload = decode(token, self.settings.SECRET_KEY, algorithms=[self.settings.ALGORITHM])
            subject_email = payload.get("sub")

            if not isinstance(subject_email, str) or not subject_email:
                return None

        except InvalidTokenError:
            return None

        return await self.user_repository.get_by_email(subject_email)

from movie_catalog.applications.interfaces.dtos.token import Token
from movie_catalog.domain.exceptions import UnauthorizedError
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

INVALID_CREDENTIALS = "Incorrect email or password"


class AuthenticateUserUseCase:
    """Exchanges an email and password for a bearer token"""

    def __init__(self, user_repository: UserRepository, auth_service: AuthService):
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def execute(self, email: str, password: str) -> Token:
        user = await self.user_repository.get_by_email(email)

        # unknown email and wrong password must be indistinguishable
        if not user or not self.auth_service.verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt: {email}")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        logger.info(f"Issued access token: {email}")
        return Token(access_token=self.auth_service.create_access_token(user), token_type="bearer")

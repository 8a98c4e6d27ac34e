from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from pwdlib import PasswordHash
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.app import app
from movie_catalog.domain.models.location import Location
from movie_catalog.domain.models.role import Role
from movie_catalog.domain.ports.repositories.genre_repository import GenreRepository
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.repositories.review_repository import ReviewRepository
from movie_catalog.domain.ports.repositories.user_repository import UserRepository
from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.infrastructure.config.dependencies import get_settings
from movie_catalog.infrastructure.config.settings import Settings
from movie_catalog.infrastructure.persistence.database import build_engine, get_session
from movie_catalog.infrastructure.persistence.models import Genre as SQLGenre
from movie_catalog.infrastructure.persistence.models import Movie as SQLMovie
from movie_catalog.infrastructure.persistence.models import User as SQLUser
from movie_catalog.infrastructure.persistence.models import table_registry

pwd_context = PasswordHash.recommended()

TEST_PASSWORD = "secret123"


@pytest.fixture
def test_settings():
    """Settings pointing at the in-memory test database"""
    return Settings(
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        SECRET_KEY="test-secret-key-for-testing-the-movie-catalog",
        ALGORITHM="HS256",
        ACCESS_TOKEN_EXPIRE_MINUTES=30,
    )


class BaseIntegrationTest:
    """Base class for integration tests with common setup"""

    @pytest_asyncio.fixture
    async def sqlite_engine(self):
        """Create test database engine"""
        engine = build_engine("sqlite+aiosqlite:///:memory:")

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.create_all)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, sqlite_engine):
        """Create test database session"""
        async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
            yield session

    @pytest_asyncio.fixture
    async def client(self, test_session, test_settings):
        """Create test HTTP client with database and settings overrides"""

        async def override_get_session():
            yield test_session

        app.dependency_overrides[get_session] = override_get_session
        app.dependency_overrides[get_settings] = lambda: test_settings

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()

    @pytest_asyncio.fixture
    async def genre(self, test_session):
        """Genre every test movie belongs to"""
        genre = SQLGenre(name="Drama")
        test_session.add(genre)
        await test_session.commit()
        await test_session.refresh(genre)
        return genre

    @pytest_asyncio.fixture
    async def movie(self, test_session, genre):
        """Published movie without reviews"""
        movie = SQLMovie(
            name="Solaris",
            description="A psychologist is sent to a station orbiting a distant planet",
            price=300.0,
            location=Location.MSK,
            genre_id=genre.id,
        )
        test_session.add(movie)
        await test_session.commit()
        await test_session.refresh(movie)
        return movie

    @pytest_asyncio.fixture
    async def user(self, test_session):
        return await _create_sql_user(test_session, "reviewer@example.com", "Anna Reviewer", [Role.USER])

    @pytest_asyncio.fixture
    async def other_user(self, test_session):
        return await _create_sql_user(test_session, "other@example.com", "Boris Other", [Role.USER])

    @pytest_asyncio.fixture
    async def admin(self, test_session):
        return await _create_sql_user(test_session, "admin@example.com", "Clara Admin", [Role.ADMIN])

    @pytest_asyncio.fixture
    async def super_admin(self, test_session):
        return await _create_sql_user(
            test_session, "root@example.com", "Dmitry Root", [Role.USER, Role.SUPER_ADMIN]
        )

    @pytest_asyncio.fixture
    async def token(self, client, user):
        return await _login(client, user.email)

    @pytest_asyncio.fixture
    async def other_token(self, client, other_user):
        return await _login(client, other_user.email)

    @pytest_asyncio.fixture
    async def admin_token(self, client, admin):
        return await _login(client, admin.email)

    @pytest_asyncio.fixture
    async def super_admin_token(self, client, super_admin):
        return await _login(client, super_admin.email)


async def _create_sql_user(session: AsyncSession, email: str, full_name: str, roles) -> SQLUser:
    user = SQLUser(
        email=email,
        full_name=full_name,
        password=pwd_context.hash(TEST_PASSWORD),
        roles=[role.value for role in roles],
    )
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


async def _login(client: AsyncClient, email: str) -> str:
    response = await client.post("/auth/token", data={"username": email, "password": TEST_PASSWORD})
    return response.json()["access_token"]


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


# Shared fixtures for service and use case testing
@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for service testing"""
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def mock_review_repository():
    """Mock review repository for service testing"""
    return AsyncMock(spec=ReviewRepository)


@pytest.fixture
def mock_genre_repository():
    """Mock genre repository for use case testing"""
    return AsyncMock(spec=GenreRepository)


@pytest.fixture
def mock_user_repository():
    """Mock user repository for use case testing"""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_auth_service():
    """Mock auth service for use case testing"""
    return MagicMock(spec=AuthService)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=LoggerPort)

from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from movie_catalog.infrastructure.config.settings import Settings


class _EngineStore:
    engine: Optional[AsyncEngine] = None


def build_engine(database_url: str) -> AsyncEngine:
    """Create the async engine; SQLite connections get foreign key enforcement"""
    if not database_url.startswith("sqlite"):
        return create_async_engine(database_url)

    options = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in database_url:
        # an in-memory database lives on one connection
        options["poolclass"] = StaticPool
    engine = create_async_engine(database_url, **options)

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def get_engine() -> AsyncEngine:
    if _EngineStore.engine is None:
        _EngineStore.engine = build_engine(Settings().DATABASE_URL)
    return _EngineStore.engine


async def get_session():
    async with AsyncSession(get_engine(), expire_on_commit=False) as session:
        yield session


async def dispose_engine() -> None:
    if _EngineStore.engine is not None:
        await _EngineStore.engine.dispose()
        _EngineStore.engine = None

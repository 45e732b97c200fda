import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# Register the table models on SQLModel.metadata
from spiral_catalog.models import records  # noqa: F401

logger = logging.getLogger(__name__)


def async_database_url(database_url: str) -> str:
    """
    Rewrite a plain database URL to use an asyncio driver.

    `sqlite://...` becomes `sqlite+aiosqlite://...` and `postgres(ql)://...`
    becomes `postgresql+asyncpg://...`. URLs that already name a driver are
    returned unchanged.
    """
    driver, sep, rest = database_url.partition("://")
    if not sep:
        raise ValueError(f"Invalid database URL: {database_url!r}")

    if driver == "sqlite":
        driver = "sqlite+aiosqlite"
    elif driver in {"postgresql", "postgres"}:
        driver = "postgresql+asyncpg"
    return f"{driver}://{rest}"


class DatabaseService:
    """
    Owns the async engine and session factory for one application instance.

    Created at startup, handed to the services, and torn down at shutdown.
    """

    def __init__(self, database_url: str):
        self.database_url = async_database_url(database_url)
        self.engine: AsyncEngine = create_async_engine(self.database_url)
        # SQLModel's session is needed for exec()
        self.async_session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_db_and_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database ready at %s", self.engine.url.render_as_string(hide_password=True))

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.async_session_maker() as session:
            yield session

    async def teardown(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")

from typing import AsyncGenerator
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from mon_ai.models.base import Base
from mon_ai.models import history, vocabulary  # noqa: F401  registers tables on Base.metadata


class Database:
    """Store client: one engine and session factory for the process lifetime."""

    def __init__(self, database_url: str):
        self.engine: AsyncEngine = create_async_engine(database_url)
        self.async_session_maker = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_async_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    database: Database = request.app.state.database
    async with database.async_session_maker() as session:
        yield session

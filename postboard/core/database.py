import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import Field, SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

logger = logging.getLogger(__name__)


class Database:
    """Owns the async engine; hands out one short-lived session per operation."""

    def __init__(self, db_url: str, echo: bool = False):
        self.url = db_url
        self.engine = create_async_engine(db_url, echo=echo)

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, Any]:
        async with AsyncSession(self.engine) as session:
            yield session

    async def create_all(self) -> None:
        """Create every table registered on SQLModel.metadata."""
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def ping(self) -> bool:
        try:
            async with self.get_session() as session:
                await session.exec(select(1))
            return True
        except SQLAlchemyError as e:
            logger.warning("Database ping failed: %s", e)
            return False

    async def disconnect(self) -> None:
        await self.engine.dispose()


class BaseModel(SQLModel):
    """Base model with common fields."""

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: str = Field(nullable=False)

"""Database client: async engine and session factory with an explicit lifecycle"""
import logging
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from app.db import models  # noqa: F401  registers tables on Base.metadata
from app.db.base import Base

logger = logging.getLogger(__name__)


class Database:
    """
    Owns the single store connection of the process.

    Created once by the application factory, connected at startup and
    disposed on shutdown. Requests borrow sessions from it through `get_db`.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    async def connect(self) -> None:
        """Create the engine and make sure every table exists."""
        if self.engine is not None:
            return
        self.engine = create_async_engine(
            self.url,
            echo=self.echo,
            poolclass=NullPool,
        )
        self._session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Connected to database {self.engine.url.render_as_string(hide_password=True)}")

    async def close(self) -> None:
        """Dispose of the engine. Safe to call more than once."""
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self._session_factory = None
        logger.info("Database connection closed")

    def session(self) -> AsyncSession:
        """Open a new session bound to the engine."""
        if self._session_factory is None:
            raise RuntimeError("Database is not connected")
        return self._session_factory()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session."""
    database: Database = request.app.state.database
    async with database.session() as session:
        try:
            yield session
        finally:
            await session.close()

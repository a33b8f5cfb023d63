"""
Database configuration and session management.
"""

import logging
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from app.config import settings

logger = logging.getLogger(__name__)

# Create declarative base
Base = declarative_base()


class Database:
    """
    Owns the async engine and the session factory for one application.
    """

    def __init__(self, url: Optional[str] = None, echo: bool = False):
        self.url = url or settings.database_url_async
        engine_options = {"echo": echo}
        if self.url.startswith("sqlite"):
            engine_options["connect_args"] = {"check_same_thread": False}
            if ":memory:" in self.url or self.url.endswith("sqlite+aiosqlite://"):
                # Every session must see the same in-memory database.
                engine_options["poolclass"] = StaticPool

        self.engine: AsyncEngine = create_async_engine(self.url, **engine_options)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        """Create every table that does not exist yet."""
        # Import models so they are registered on the metadata
        from app.infrastructure.db import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ready")

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function to get database session.
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        yield session

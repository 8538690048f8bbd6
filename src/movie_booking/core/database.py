"""
Database handle and async session management

The engine (and its connection pool) lives on a `Database` object that is
created at application startup and disposed at shutdown. Services receive the
handle explicitly instead of importing a module-level engine.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from movie_booking.core.config import Settings

# Create declarative base for models
Base = declarative_base()


class Database:
    """Owns the async engine and the session factory"""

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(
            url,
            echo=echo,  # Log SQL queries in debug mode
            pool_pre_ping=True,  # Verify connections before using
            **engine_kwargs,
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Receipts read attributes after commit
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a pooled handle from application settings"""
        engine_kwargs = {}
        if not settings.DATABASE_URL.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=settings.DB_MAX_OVERFLOW,
                pool_timeout=settings.DB_POOL_TIMEOUT,
            )
        return cls(settings.DATABASE_URL, echo=settings.DEBUG, **engine_kwargs)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Check out a session for one unit of work.

        The underlying connection goes back to the pool on every exit path.
        """
        async with self.session_factory() as session:
            yield session

    async def create_all(self):
        """
        Create all tables.
        Only for development and tests - production schemas are managed outside the app.
        """
        # Import models to register them with Base
        from movie_booking import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self):
        """
        Drop all tables.
        WARNING: Use only in development/testing!
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self):
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the handle created in the app lifespan"""
    return request.app.state.database

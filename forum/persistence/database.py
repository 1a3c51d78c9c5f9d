"""Async engine and session factory for Postgres (asyncpg driver)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from forum.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine with the pool sized from ``settings.database``.

    SQL is echoed when ``debug`` is on.
    """
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory; sessions keep loaded rows usable after commit."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)

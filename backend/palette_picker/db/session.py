"""Async Session Factory: provides async DB sessions for direct usage outside FastAPI.

Invariants:
    - Meant for scripts (seed/reset); the caller owns the engine and disposes it
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)


def create_engine(database_url: str) -> AsyncEngine:
    """Create a standalone async engine for the given database URL."""
    return create_async_engine(database_url, echo=False)


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to the given engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )

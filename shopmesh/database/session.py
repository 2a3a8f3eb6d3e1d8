"""
Global database session and engine management.

This module lazily builds the process-wide AsyncEngine and async_sessionmaker
from ``shopmesh.core.config.settings``.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from shopmesh.core.config import settings

from .utils import create_engine, create_sessionmaker

_engine: Optional[AsyncEngine] = None
_session_maker: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """Return the global engine, creating it from settings on first use."""
    global _engine
    if _engine is None:
        database = settings.database
        _engine = create_engine(database.url, echo=database.echo)
    return _engine


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Return the global session factory bound to ``get_engine()``."""
    global _session_maker
    if _session_maker is None:
        _session_maker = create_sessionmaker(get_engine())
    return _session_maker


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with get_session_maker()() as session:
        yield session


async def dispose_engine() -> None:
    """Dispose the global engine (if any) and forget the session factory."""
    global _engine, _session_maker
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_maker = None

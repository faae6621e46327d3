"""Async engine and session factory for the groups database."""

from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.config import Settings, settings


def _engine_options(config: Settings) -> dict[str, Any]:
    """Pool options for the configured backend.

    SQLite (local runs) uses SQLAlchemy's default pool; sizing only applies
    to PostgreSQL.
    """
    if config.is_sqlite:
        return {"echo": config.debug}
    return {
        "echo": config.debug,
        "pool_pre_ping": True,
        "pool_size": config.db_pool_size,
        "max_overflow": config.db_max_overflow,
        "pool_timeout": config.db_pool_timeout,
        "pool_recycle": config.db_pool_recycle,
    }


def build_engine(config: Settings = settings) -> AsyncEngine:
    """Create the async engine for ``config.database_url``."""
    return create_async_engine(config.async_database_url, **_engine_options(config))


engine = build_engine()

# Sessions are opened per Unit of Work; objects stay readable after commit
async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database sessions."""
    async with async_session_factory() as session:
        yield session


async def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    await engine.dispose()

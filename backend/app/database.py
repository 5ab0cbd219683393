"""
Project Backend — Entity Store Connection
===========================================

What:  Async SQLAlchemy engine and session factory builders, plus the ORM base.
Why:   Centralizes all store connection logic in one place.
How:   The assembly routine calls create_engine() and create_session_factory()
       once per application; repositories open one session per operation.
Who:   Used by app.assembly (construction) and app.models (Base).
When:  Engine is created when the application is assembled.

Connection Pooling Strategy:
    pool_size=20:      Persistent connections for normal load
    max_overflow=10:   Temporary connections for traffic spikes (total max = 30)
    pool_pre_ping:     Validates connections before use
    pool_recycle=3600: Recycles connections every hour

    SQLite has no server-side connection limit, so the pool options are
    skipped and SQLAlchemy picks the dialect's default pool.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every collection of the entity store (users, packages) is a model class
    registered on this metadata, which Alembic reads for migrations.
    """
    pass


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Build the async engine for the configured database URL.

    Echoes SQL in DEBUG mode for development visibility.
    """
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(settings.database_url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Build the session factory handed to every repository.

    expire_on_commit=False: entities returned by a repository stay readable
    after their session has been committed and closed.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create every registered collection that does not exist yet."""
    # Imported for their side effect of registering tables on Base.metadata
    from app.models import package, user  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()

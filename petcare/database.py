"""Database configuration and session management."""

from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
    AsyncEngine,
)
from sqlalchemy.orm import DeclarativeBase

from petcare.config import Settings


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def utcnow() -> datetime:
    """Current time as naive UTC, the representation stored in every timestamp column."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(settings: Optional[Settings] = None) -> AsyncEngine:
    """
    Create the async database engine.

    Every connection gets SQLite foreign key enforcement switched on, which
    the cascading deletes rely on.

    Returns:
        AsyncEngine: The async SQLAlchemy engine
    """
    settings = settings or Settings()
    engine = create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,
    )
    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autocommit=False,
        autoflush=False,
    )


engine = get_engine()

async_session_maker = get_session_maker(engine)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for FastAPI to provide async database sessions.

    The session commits once the request handler returns and rolls back when
    anything raised, so every request is one unit of work.

    Yields:
        AsyncSession: An async SQLAlchemy session
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_models(target: Optional[AsyncEngine] = None) -> None:
    """Create all tables that do not exist yet."""
    import petcare.models  # noqa: F401 - registers every model on Base.metadata

    async with (target or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

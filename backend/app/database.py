"""
Notes API - Database Session Management
========================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   Keeps all connection handling in one place; handlers only ever see an
       AsyncSession handed to them through Depends(get_db_session).
How:   One module-level engine owns the connection pool. Each request gets its
       own session which commits on success and rolls back on error.

Connection Pooling:
    pool_size=20, max_overflow=10 (at most 30 connections)
    pool_pre_ping validates connections before use
    pool_recycle=3600 recycles connections every hour

    SQLite (used by the test suite) does not take pool sizing arguments, so
    they are only passed for server databases.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
# Created lazily by SQLAlchemy: no connection is opened until first use.
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay loaded after commit, so response
# models can be built without another round trip.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On error: rolls back and re-raises for the global error handler
        4. Always: closes the session (returns connection to pool)

    Transaction ownership:
        NoteService commits its own writes before returning. The code after
        `yield` runs once the response has already started, so a commit
        placed here could fail after the client was told the write
        succeeded, and that failure could never become an HTTP response.
        Anything left uncommitted when the session closes is rolled back.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables() -> None:
    """
    Creates any missing tables from the ORM metadata.

    Idempotent: existing tables are left alone. Called from the lifespan
    when settings.create_tables_on_startup is enabled.
    """
    # Registers the models with Base.metadata
    from app.models import note  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Closes all pooled connections. Called during application shutdown."""
    await engine.dispose()

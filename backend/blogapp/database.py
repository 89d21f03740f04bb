"""
Blog Backend - Database Session Management
===========================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   A `Database` object owns one async engine and its session factory.
       The application factory builds it and stores it on `app.state`;
       route dependencies pull per-request sessions from there.
Who:   Used by the post store dependency, the health check and Alembic.
When:  Engine is created when the app is built; sessions are created per-request.

Connection Pooling:
    PostgreSQL URLs get a sized pool (pool_size + max_overflow connections,
    pre-ping, hourly recycle). SQLite URLs use SQLAlchemy's defaults, since
    its pools don't accept sizing arguments.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from blogapp.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object, which Alembic reads for --autogenerate and
    `Database.create_all()` uses for development setups.
    """
    pass


class Database:
    """
    Owns the async engine and session factory for one application instance.

    Attributes:
        engine:          AsyncEngine managing the connection pool
        session_factory: async_sessionmaker producing AsyncSession objects
    """

    def __init__(self, config: Settings):
        self.engine: AsyncEngine = create_async_engine(
            config.database_url,
            echo=config.log_level == "DEBUG",
            **self._pool_options(config),
        )
        # expire_on_commit=False: objects stay readable after the
        # per-request commit, when the response is serialized
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @staticmethod
    def _pool_options(config: Settings) -> Dict[str, Any]:
        if config.is_sqlite:
            return {}
        return {
            "pool_size": config.db_pool_size,
            "max_overflow": config.db_max_overflow,
            "pool_pre_ping": config.db_pool_pre_ping,
            "pool_recycle": 3600,
        }

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Yield one session, committing on success and rolling back on error.

        How it works:
            1. Creates a new session from the factory
            2. Yields it to the caller (the store performs queries)
            3. On success: commits the transaction
            4. On error: rolls back and re-raises
            5. Always: closes the session (returns connection to pool)
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create any missing tables from the ORM metadata."""
        # Import registers the models on Base.metadata
        from blogapp.models import post  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(
            "Database tables ensured for %s",
            self.engine.url.render_as_string(hide_password=True),
        )

    async def dispose(self) -> None:
        """Gracefully close all connections in the pool (called on shutdown)."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    Resolves the `Database` built by the application factory from
    `request.app.state.database` and delegates to `Database.session()`.

    Example usage in a route:
        @router.get("/posts")
        async def list_posts(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session

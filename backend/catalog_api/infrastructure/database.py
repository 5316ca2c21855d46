"""Database Session Manager — async engine, session factory and error mapping.

Invariants:
    - Every session rolls back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - One session per logical statement group; concurrent work opens its own sessions

Design Decisions:
    - Manager injected into the catalog service, initialized by the FastAPI lifespan
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Pool sizing only applied to server databases (SQLite file pools ignore it)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from catalog_api.core.errors import DatabaseError
from catalog_api.db.base import Base
from catalog_api import models  # noqa: F401

logger = logging.getLogger(__name__)


def _error_detail(exc: SQLAlchemyError) -> str:
    """Driver-level message without SQLAlchemy's statement dump."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


class DatabaseSessionManager:
    """Manages async database sessions with pooling and rollback."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        engine_kwargs = {"echo": echo, "pool_pre_ping": True}
        if make_url(database_url).get_backend_name() != "sqlite":
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(
        self, action: str = "Database operation failed",
    ) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback; failures surface as DatabaseError(action)."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            detail = _error_detail(e)
            logger.error(f"{action}: {detail}")
            raise DatabaseError(action, detail) from e
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create any missing tables (idempotent)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


def get_db_manager() -> DatabaseSessionManager:
    """Return the process-wide manager; raises if the lifespan has not run."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    return db_manager

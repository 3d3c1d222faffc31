"""Database Session Manager — async engine, per-request sessions, automatic rollback.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - In-memory SQLite shares one connection: sessions on it are serialized
      by an asyncio.Lock, one request transaction at a time

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: returned ORM objects stay readable after commit
    - Pool sizing only for server databases; SQLite engines keep the dialect's pool
    - SQLite connections switch on PRAGMA foreign_keys: FKs (and ON DELETE
      CASCADE) are enforced the same way as on server databases
"""

import asyncio
import logging
from contextlib import asynccontextmanager, nullcontext
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from placeholder_api.core.errors import DatabaseError
from placeholder_api.db.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _is_shared_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


class DatabaseSessionManager:
    """Manages async database sessions with rollback, schema creation and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        if make_url(database_url).get_backend_name() == "sqlite":
            self.engine = create_async_engine(database_url)
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        else:
            self.engine = create_async_engine(
                database_url,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self._lock = (
            asyncio.Lock() if _is_shared_memory_sqlite(database_url) else None
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        async with self._lock or nullcontext():
            session = self._session_factory()
            try:
                yield session
            except IntegrityError as e:
                await session.rollback()
                logger.error(f"DB integrity error: {e}")
                raise DatabaseError("Integrity constraint violated", "commit")
            except OperationalError as e:
                await session.rollback()
                logger.error(f"DB operational error: {e}")
                raise DatabaseError("Connection or operational error", "execute")
            except DBAPIError as e:
                await session.rollback()
                logger.error(f"DB driver error: {e}")
                raise DatabaseError("Database driver error", "query")
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"SQLAlchemy error: {e}")
                raise DatabaseError("Database operation failed", "unknown")
            finally:
                await session.close()

    async def create_schema(self) -> None:
        """Create all tables that do not exist yet (in-memory and dev databases)."""
        import placeholder_api.models  # noqa: F401  (populate Base.metadata)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session

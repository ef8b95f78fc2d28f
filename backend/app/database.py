"""
Database Session Manager
------------------------
Async engine + request-scoped sessions.

Every session handed out by `session()` is rolled back when a store call fails
(the SQLAlchemy error is logged and re-raised as `DatabaseError`) and closed on
every exit path, so a pooled connection never outlives the
request that checked it out.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.errors import DatabaseError, classify_store_error

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseSessionManager:
    """Owns the connection pool for one running application."""

    def __init__(self, database_url: str, pool_size: int = 10, max_overflow: int = 10):
        engine_options = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_options.update(pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600)

        self.engine = create_async_engine(database_url, **engine_options)
        if self.engine.dialect.name == "sqlite":
            # SQLite leaves foreign keys off per connection unless asked
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            category = classify_store_error(e)
            logger.error(f"DB {category.value} error: {e}")
            raise DatabaseError(category, f"Database operation failed ({category.value})") from e
        finally:
            await session.close()

    async def create_all(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except DatabaseError as e:
            logger.error(f"Database health check failed: {e}")
            return False

    async def dispose(self):
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one pooled session per request."""
    manager: DatabaseSessionManager = request.app.state.db
    async with manager.session() as session:
        yield session

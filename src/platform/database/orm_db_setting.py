"""
SQLAlchemy async engine and session management

The `Database` object owns one engine for its whole lifetime: it is built once
by the DI container at startup and disposed at shutdown. Nothing in this
module keeps a process-global engine.

Backends:
- PostgreSQL (asyncpg): production store. Row locks (`SELECT ... FOR UPDATE`)
  serialize hold/confirm on the seats they touch.
- SQLite (aiosqlite): local runs and tests. Every transaction is opened with
  `BEGIN IMMEDIATE`, so write transactions are serialized by the database lock.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator, Optional

from sqlalchemy import DateTime, event
from sqlalchemy.engine import Dialect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator

from src.platform.exception.exceptions import StoreError
from src.platform.logging.loguru_io import Logger


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


class UtcDateTime(TypeDecorator[datetime]):
    """
    Timezone-aware UTC datetime on every backend.

    PostgreSQL keeps the offset natively; SQLite stores naive text, so values are
    normalized to UTC before binding and re-tagged as UTC when loaded.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect: Dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError(f'naive datetime not allowed: {value!r}')
        value = value.astimezone(timezone.utc)
        if dialect.name == 'sqlite':
            return value.replace(tzinfo=None)
        return value

    def process_result_value(
        self, value: Optional[datetime], dialect: Dialect
    ) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


# =============================================================================
# Database (constructed once, injected everywhere)
# =============================================================================


class Database:
    """Database class for managing async sessions following dependency-injector best practices"""

    def __init__(
        self,
        *,
        db_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 10,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        pool_pre_ping: bool = True,
    ) -> None:
        self._db_url = db_url
        self.is_sqlite = db_url.startswith('sqlite')
        engine_kwargs: dict[str, Any] = {'echo': echo, 'future': True}
        if not self.is_sqlite:
            engine_kwargs |= {
                'pool_size': pool_size,
                'max_overflow': max_overflow,
                'pool_timeout': pool_timeout,
                'pool_recycle': pool_recycle,
                'pool_pre_ping': pool_pre_ping,
            }
        self._engine: AsyncEngine = create_async_engine(db_url, **engine_kwargs)
        if self.is_sqlite:
            _use_immediate_transactions(self._engine)

        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Plain session for reads; no transaction management"""
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                Logger.base.error(f'🗄️ [DB] Read failed: {type(e).__name__}: {e}')
                raise StoreError('Store unavailable, please retry') from e

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession, None]:
        """
        All-or-nothing unit: commits when the block exits normally, rolls back on
        any exception. Driver/SQL failures surface as StoreError; domain errors
        (e.g. ConflictError) propagate unchanged after the rollback.
        """
        async with self._session_factory() as session:
            try:
                async with session.begin():
                    yield session
            except SQLAlchemyError as e:
                Logger.base.error(f'🗄️ [DB] Transaction rolled back: {type(e).__name__}: {e}')
                raise StoreError('Store transaction failed, please retry') from e

    async def create_tables(self) -> None:
        """Create tables if they don't exist (dev/test; production runs Alembic)"""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)

    async def dispose(self) -> None:
        await self._engine.dispose()
        Logger.base.info('🗄️ [DB] Engine disposed')


def _use_immediate_transactions(engine: AsyncEngine) -> None:
    """
    Take the SQLite write lock at BEGIN instead of at the first write, so a
    read-check-insert sequence cannot interleave with another writer.
    """

    @event.listens_for(engine.sync_engine, 'connect')
    def _on_connect(dbapi_connection: Any, _record: Any) -> None:
        # stop the driver from emitting its own deferred BEGIN
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()

    @event.listens_for(engine.sync_engine, 'begin')
    def _on_begin(conn: Any) -> None:
        conn.exec_driver_sql('BEGIN IMMEDIATE')

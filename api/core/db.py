"""
Async database access helpers (raw SQL) using asyncpg.

`DatabasePool` owns one asyncpg connection pool. The FastAPI lifespan builds
exactly one per process and hangs it on `app.state` (see `api/main.py`);
everything else receives it as an argument instead of reaching for a global.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import asyncpg

from .config import DatabaseSettings, database_settings

logger = logging.getLogger(__name__)


class DatabasePoolError(RuntimeError):
    pass


class PoolInitializationError(DatabasePoolError):
    pass


class PoolNotInitializedError(DatabasePoolError):
    pass


class PoolExhaustedError(DatabasePoolError):
    pass


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class DatabasePool:
    """
    Lifecycle wrapper around `asyncpg.Pool`.

        pool = DatabasePool(database_settings())
        await pool.initialize()
        async with pool.connection() as conn:
            await conn.fetch("SELECT 1")
        await pool.shutdown()
    """

    def __init__(self, settings: DatabaseSettings | None = None) -> None:
        self._settings = settings or database_settings()
        self._pool: asyncpg.Pool | None = None

    @property
    def settings(self) -> DatabaseSettings:
        return self._settings

    @property
    def is_initialized(self) -> bool:
        return self._pool is not None

    async def initialize(self) -> None:
        if self._pool is not None:
            raise PoolInitializationError("DB pool is already initialized. Call shutdown() first.")

        dsn = self._settings.dsn()
        if not dsn:
            raise PoolInitializationError(
                "Database is not configured. Set DATABASE_URL or DB_USER, DB_PASSWORD and DB_CONNECT_STRING."
            )

        try:
            self._pool = await asyncpg.create_pool(
                dsn=dsn,
                min_size=self._settings.min_size,
                max_size=self._settings.max_size,
                command_timeout=self._settings.command_timeout_s,
            )
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, ValueError, asyncio.TimeoutError) as exc:
            raise PoolInitializationError(f"Failed to create DB pool: {exc}") from exc

        logger.info(
            "db_pool_initialized min_size=%s max_size=%s",
            self._settings.min_size,
            self._settings.max_size,
        )

    def _require_pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise PoolNotInitializedError("DB pool is not initialized. Call initialize() on startup.")
        return self._pool

    async def acquire(self) -> asyncpg.Connection:
        pool = self._require_pool()
        timeout = self._settings.acquire_timeout_s
        try:
            return await pool.acquire(timeout=timeout)
        except asyncio.TimeoutError as exc:
            raise PoolExhaustedError(f"No DB connection became available within {timeout}s.") from exc

    async def release(self, connection: asyncpg.Connection) -> None:
        if self._pool is None:
            # shutdown() already closed every connection, borrowed ones included.
            logger.warning("db_release_after_shutdown")
            return
        await self._pool.release(connection)

    async def shutdown(self) -> None:
        if self._pool is None:
            return None
        pool, self._pool = self._pool, None
        await pool.close()
        logger.info("db_pool_closed")

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[asyncpg.Connection]:
        conn = await self.acquire()
        try:
            yield conn
        finally:
            await self.release(conn)

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        async with self.connection() as conn:
            row = await conn.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        async with self.connection() as conn:
            rows = await conn.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

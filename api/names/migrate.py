"""
Idempotent schema setup for the name catalog.

Runs once on startup, before any repository call.
"""

from __future__ import annotations

import logging

import asyncpg

from core.db import DatabasePool

from .query import TABLE

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS = (
    f"""
    CREATE TABLE IF NOT EXISTS {TABLE} (
        id BIGINT GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
        name VARCHAR(100) NOT NULL,
        gender VARCHAR(10) NOT NULL CHECK (gender IN ('male', 'female', 'neutral')),
        origin VARCHAR(100),
        created_at TIMESTAMPTZ NOT NULL DEFAULT now()
    )
    """,
    f"CREATE INDEX IF NOT EXISTS idx_{TABLE}_gender ON {TABLE} (gender)",
)

# IF NOT EXISTS still races when two processes create the same object at once;
# the loser sees one of these instead of a no-op.
_ALREADY_EXISTS = (
    asyncpg.exceptions.DuplicateTableError,
    asyncpg.exceptions.DuplicateObjectError,
    asyncpg.exceptions.UniqueViolationError,
)


async def ensure_schema(pool: DatabasePool) -> None:
    async with pool.connection() as conn:
        for statement in SCHEMA_STATEMENTS:
            try:
                await conn.execute(statement)
            except _ALREADY_EXISTS as exc:
                logger.warning("schema_object_exists detail=%s", exc)
    logger.info("schema_ready table=%s", TABLE)

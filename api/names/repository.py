"""
Name catalog persistence (raw SQL).
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Any

import asyncpg

from core.db import DatabasePool

from .errors import PersistenceError
from .query import TABLE, NameQuery
from .records import NameQuerySpec, NameRecord, RandomNames

# Pool errors (not initialized, exhausted) are not listed and propagate as-is.
_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)

_INSERT_SQL = f"""
    INSERT INTO {TABLE} (name, gender, origin)
    VALUES ($1, $2, $3)
"""


def _to_record(row: dict[str, Any]) -> NameRecord:
    return NameRecord(
        id=int(row["id"]),
        name=str(row["name"]),
        gender=str(row["gender"]),
        origin=row["origin"],
        created_at=row["created_at"],
    )


class NameRepository:
    def __init__(self, pool: DatabasePool) -> None:
        self._pool = pool

    async def find_random(self, spec: NameQuerySpec) -> RandomNames:
        """
        Pick up to `spec.count` names in random order.

        Fewer names come back when fewer rows match the filters.
        """
        sql, args = NameQuery.from_spec(spec).render()
        try:
            rows = await self._pool.fetch_all(sql, *args)
        except _DRIVER_ERRORS as exc:
            raise PersistenceError(f"Failed to fetch random names: {exc}") from exc

        return RandomNames(
            names=[str(row["name"]) for row in rows],
            gender=spec.gender,
            origin=spec.origin,
        )

    async def add(self, record: NameRecord) -> NameRecord:
        try:
            row = await self._pool.fetch_one(
                _INSERT_SQL + "RETURNING id, name, gender, origin, created_at",
                record.name,
                record.gender,
                record.origin,
            )
        except asyncpg.exceptions.CheckViolationError as exc:
            raise PersistenceError(f"Invalid gender {record.gender!r}.") from exc
        except _DRIVER_ERRORS as exc:
            raise PersistenceError(f"Failed to add name: {exc}") from exc

        if row is None:
            raise PersistenceError("Failed to add name.")
        return _to_record(row)

    async def add_many(self, records: Iterable[NameRecord]) -> int:
        """
        Insert a batch of names in one transaction; all or nothing.
        """
        values = [(r.name, r.gender, r.origin) for r in records]
        if not values:
            return 0

        try:
            async with self._pool.connection() as conn:
                async with conn.transaction():
                    await conn.executemany(_INSERT_SQL, values)
        except _DRIVER_ERRORS as exc:
            raise PersistenceError(f"Failed to add names: {exc}") from exc
        return len(values)

    async def get_stats(self) -> list[tuple[str, int]]:
        """
        Row count per gender. Genders without rows are absent.
        """
        try:
            rows = await self._pool.fetch_all(
                f"""
                SELECT gender, count(*) AS count
                FROM {TABLE}
                GROUP BY gender
                ORDER BY gender
                """
            )
        except _DRIVER_ERRORS as exc:
            raise PersistenceError(f"Failed to fetch name stats: {exc}") from exc
        return [(str(row["gender"]), int(row["count"])) for row in rows]

    async def count_names(self) -> int:
        try:
            row = await self._pool.fetch_one(f"SELECT count(*) AS n FROM {TABLE}")
        except _DRIVER_ERRORS as exc:
            raise PersistenceError(f"Failed to count names: {exc}") from exc
        return int((row or {}).get("n", 0))

"""
FastAPI dependencies for name endpoints.
"""

from __future__ import annotations

from fastapi import Depends, Request

from core.db import DatabasePool, PoolNotInitializedError

from .repository import NameRepository


def get_pool(request: Request) -> DatabasePool:
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise PoolNotInitializedError("DB pool is not initialized. Call initialize() on startup.")
    return pool


def get_repository(pool: DatabasePool = Depends(get_pool)) -> NameRepository:
    return NameRepository(pool)

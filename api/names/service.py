"""
Name catalog business logic.

Validates raw request values, then hands normalized records to the
repository. Routers stay free of validation rules.
"""

from __future__ import annotations

import logging

from . import validation
from .records import NameRecord, RandomNames
from .repository import NameRepository

logger = logging.getLogger(__name__)


async def random_names(
    repository: NameRepository,
    *,
    gender: str | None = None,
    count: str | int | None = None,
    origin: str | None = None,
) -> RandomNames:
    spec = validation.validate_query(gender, count, origin)
    return await repository.find_random(spec)


async def add_name(
    repository: NameRepository,
    *,
    name: str | None,
    gender: str | None,
    origin: str | None = None,
) -> NameRecord:
    record = validation.validate_new_name(name, gender, origin)
    saved = await repository.add(record)
    logger.info("name_added id=%s gender=%s", saved.id, saved.gender)
    return saved


async def name_stats(repository: NameRepository) -> list[tuple[str, int]]:
    return await repository.get_stats()

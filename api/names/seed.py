"""
Load the starter catalog into the database.

Usage:
    python -m names.seed [--force]
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from core import config
from core.db import DatabasePool

from .catalog import seed_records
from .migrate import ensure_schema
from .repository import NameRepository

logger = logging.getLogger(__name__)


async def seed(pool: DatabasePool, *, force: bool = False) -> int:
    """
    Insert the catalog in one transaction and return the number of rows added.

    An already-populated table is left alone unless `force` is set.
    """
    await ensure_schema(pool)
    repository = NameRepository(pool)

    existing = await repository.count_names()
    if existing and not force:
        logger.info("seed_skipped existing_rows=%s", existing)
        return 0

    inserted = await repository.add_many(seed_records())
    logger.info("seed_complete inserted=%s", inserted)
    return inserted


async def _run(force: bool) -> int:
    pool = DatabasePool(config.database_settings())
    await pool.initialize()
    try:
        return await seed(pool, force=force)
    finally:
        await pool.shutdown()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the fantasy name catalog")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Insert the catalog even when the table already has rows",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.log_level())
    asyncio.run(_run(args.force))


if __name__ == "__main__":
    main()

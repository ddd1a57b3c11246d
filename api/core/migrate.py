"""
Apply `schema.sql` to the database named by DATABASE_URL.

Usage (from the `api/` directory or an installed environment):

    python -m core.migrate
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import asyncpg

from . import db, settings

logger = logging.getLogger(__name__)

SCHEMA_FILE = Path(__file__).with_name("schema.sql")


def load_schema() -> str:
    return SCHEMA_FILE.read_text(encoding="utf-8")


async def migrate() -> None:
    schema = load_schema()
    conn = await asyncpg.connect(dsn=db.database_url())
    try:
        # Without arguments asyncpg runs the whole script in one round trip.
        async with conn.transaction():
            await conn.execute(schema)
    finally:
        await conn.close()
    logger.info("migration_done schema=%s", SCHEMA_FILE.name)


def main() -> None:
    settings.configure_logging()
    asyncio.run(migrate())


if __name__ == "__main__":
    main()

"""Database utilities for todo list persistence.

Smoke check:
  - Without DATABASE_URL: start the app, POST /api/lists, then GET /api/lists.
  - With DATABASE_URL set: POST /api/lists, restart server, then GET /api/lists.
"""

from __future__ import annotations

import logging
from typing import Optional

import asyncpg

logger = logging.getLogger(__name__)

_pool: Optional[asyncpg.Pool] = None

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS lists (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS todos (
        id INTEGER NOT NULL,
        list_id INTEGER NOT NULL REFERENCES lists(id) ON DELETE CASCADE,
        name TEXT NOT NULL,
        completed TEXT NOT NULL DEFAULT 'f',
        PRIMARY KEY (list_id, id)
    );
    """,
)


def is_enabled() -> bool:
    return _pool is not None


def get_pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("Database pool is not initialized")
    return _pool


async def init_db(database_url: str, *, min_size: int = 1, max_size: int = 5) -> None:
    global _pool

    if _pool is not None:
        return

    _pool = await asyncpg.create_pool(dsn=database_url, min_size=min_size, max_size=max_size)
    await create_schema(_pool)
    logger.info("Database initialized for todo list persistence")


async def create_schema(pool: asyncpg.Pool) -> None:
    async with pool.acquire() as conn:
        for statement in SCHEMA_STATEMENTS:
            await conn.execute(statement)


async def close_db() -> None:
    global _pool

    if _pool is None:
        return

    await _pool.close()
    _pool = None
    logger.info("Database pool closed")

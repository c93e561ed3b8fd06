"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`). Every request shares the same pool;
a failed query only fails its own request and the connection goes back to the
pool.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from core import settings

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None

FOREIGN_KEY_VIOLATION = "23503"


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    return _sanitize_database_url(settings.database_url())


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=settings.pool_min_size(),
        max_size=settings.pool_max_size(),
        command_timeout=settings.command_timeout(),
    )
    logger.info(
        "db_pool_ready min_size=%s max_size=%s",
        settings.pool_min_size(),
        settings.pool_max_size(),
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def is_foreign_key_violation(exc: BaseException) -> bool:
    """
    True when the store rejected a statement for referencing a missing row.

    Prefers the structured SQLSTATE; message text is only a fallback for
    errors that arrive without one.
    """
    if isinstance(exc, asyncpg.ForeignKeyViolationError):
        return True
    if getattr(exc, "sqlstate", None) == FOREIGN_KEY_VIOLATION:
        return True
    return "foreign key constraint" in str(exc)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool().fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool().fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> str:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). Returns the status tag, e.g. `INSERT 0 1`.
    """
    return await pool().execute(sql, *args)

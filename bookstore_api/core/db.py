"""
Async database access helpers (raw SQL) using asyncpg.

The pool is created in the FastAPI lifespan (see `bookstore_api/main.py`),
kept on `app.state.pool`, and handed to routes through the `get_pool`
dependency. Services and repositories receive it as an explicit argument.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import asyncpg
from fastapi import Request

from . import config
from .errors import StoreError

logger = logging.getLogger(__name__)


async def create_pool() -> asyncpg.Pool:
    pool = await asyncpg.create_pool(
        dsn=config.database_url(),
        min_size=config.db_pool_min_size(),
        max_size=config.db_pool_max_size(),
        command_timeout=config.db_command_timeout(),
    )
    logger.info(
        "db_pool_ready min_size=%s max_size=%s",
        config.db_pool_min_size(),
        config.db_pool_max_size(),
    )
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()
    logger.info("db_pool_closed")


def get_pool(request: Request) -> asyncpg.Pool:
    """
    FastAPI dependency returning the pool owned by the running app.
    """
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. Start the app through its lifespan.")
    return pool


def classify(exc: BaseException) -> str | None:
    """
    Map a driver/transport exception to a StoreError kind (None = not a store error).
    """
    if isinstance(exc, asyncpg.IntegrityConstraintViolationError):
        return "constraint"
    if isinstance(
        exc,
        (
            asyncpg.PostgresConnectionError,
            asyncpg.CannotConnectNowError,
            asyncpg.InterfaceError,
            OSError,
            TimeoutError,
            asyncio.TimeoutError,
        ),
    ):
        return "connectivity"
    if isinstance(exc, asyncpg.PostgresError):
        return "statement"
    return None


@asynccontextmanager
async def _store_call(operation: str) -> AsyncIterator[None]:
    try:
        yield
    except Exception as exc:
        kind = classify(exc)
        if kind is None:
            raise
        raise StoreError(kind, operation, exc) from exc


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(pool: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    async with _store_call("fetch_one"):
        row = await pool.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    async with _store_call("fetch_all"):
        rows = await pool.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(pool: asyncpg.Pool, sql: str, *args: Any) -> str:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL) and return asyncpg's status tag.
    """
    async with _store_call("execute"):
        return await pool.execute(sql, *args)


def affected_rows(status_tag: str) -> int:
    # "DELETE 3", "UPDATE 0", "INSERT 0 1": the row count is the last token.
    parts = (status_tag or "").split()
    if not parts or not parts[-1].isdigit():
        return 0
    return int(parts[-1])

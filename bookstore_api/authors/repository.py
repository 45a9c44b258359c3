"""
Author persistence (raw SQL).
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

import asyncpg

from bookstore_api.core import db


async def list_authors(pool: asyncpg.Pool) -> list[dict]:
    return await db.fetch_all(
        pool,
        """
        SELECT name, nationality
        FROM authors
        -- Rows created in the same microsecond fall back to id order.
        ORDER BY created_at ASC, id ASC
        """,
    )


async def get_author_by_id(pool: asyncpg.Pool, author_id: UUID) -> dict | None:
    return await db.fetch_one(
        pool,
        """
        SELECT id, name, nationality, created_at
        FROM authors
        WHERE id = $1
        """,
        author_id,
    )


async def create_author(
    pool: asyncpg.Pool,
    *,
    author_id: UUID,
    name: str,
    nationality: str,
    created_at: datetime,
) -> dict:
    row = await db.fetch_one(
        pool,
        """
        INSERT INTO authors (id, name, nationality, created_at)
        VALUES ($1, $2, $3, $4)
        RETURNING id, name, nationality, created_at
        """,
        author_id,
        name,
        nationality,
        created_at,
    )
    if row is None:
        raise RuntimeError("Failed to create author.")
    return row


async def delete_author(pool: asyncpg.Pool, author_id: UUID) -> int:
    status = await db.execute(
        pool,
        """
        DELETE FROM authors
        WHERE id = $1
        """,
        author_id,
    )
    return db.affected_rows(status)


async def create_authors(pool: asyncpg.Pool, rows: list[dict]) -> int:
    """
    Insert many authors in one statement: either every row lands or none does.

    Each row needs `id`, `name`, `nationality` and `created_at`.
    """
    status = await db.execute(
        pool,
        """
        INSERT INTO authors (id, name, nationality, created_at)
        SELECT * FROM unnest($1::uuid[], $2::text[], $3::text[], $4::timestamptz[])
        """,
        [row["id"] for row in rows],
        [row["name"] for row in rows],
        [row["nationality"] for row in rows],
        [row["created_at"] for row in rows],
    )
    return db.affected_rows(status)

"""
Book persistence (raw SQL).

`author_id` is stored as given; the schema does not enforce that the
author exists.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

import asyncpg

from bookstore_api.core import db


async def list_books(pool: asyncpg.Pool) -> list[dict]:
    return await db.fetch_all(
        pool,
        """
        SELECT title, author_id
        FROM books
        -- Rows created in the same microsecond fall back to id order.
        ORDER BY created_at ASC, id ASC
        """,
    )


async def get_book_by_id(pool: asyncpg.Pool, book_id: UUID) -> dict | None:
    return await db.fetch_one(
        pool,
        """
        SELECT id, title, author_id, created_at
        FROM books
        WHERE id = $1
        """,
        book_id,
    )


async def create_book(
    pool: asyncpg.Pool,
    *,
    book_id: UUID,
    title: str,
    author_id: UUID,
    created_at: datetime,
) -> dict:
    row = await db.fetch_one(
        pool,
        """
        INSERT INTO books (id, title, author_id, created_at)
        VALUES ($1, $2, $3, $4)
        RETURNING id, title, author_id, created_at
        """,
        book_id,
        title,
        author_id,
        created_at,
    )
    if row is None:
        raise RuntimeError("Failed to create book.")
    return row


async def delete_book(pool: asyncpg.Pool, book_id: UUID) -> int:
    status = await db.execute(
        pool,
        """
        DELETE FROM books
        WHERE id = $1
        """,
        book_id,
    )
    return db.affected_rows(status)

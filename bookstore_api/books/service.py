"""
Book business logic.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import uuid4

import asyncpg
from fastapi import HTTPException, status

from bookstore_api.core import ids

from . import repository, schemas

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def books_index(pool: asyncpg.Pool) -> list[schemas.BookSummary]:
    rows = await repository.list_books(pool)
    return [schemas.BookSummary(title=str(row["title"]), author_id=row["author_id"]) for row in rows]


async def show_book(pool: asyncpg.Pool, raw_book_id: str) -> schemas.BookResponse:
    book_id = ids.parse_id(raw_book_id, entity="book")
    row = await repository.get_book_by_id(pool, book_id)
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Book not found.",
        )
    return schemas.BookResponse(id=row["id"], title=str(row["title"]), author_id=row["author_id"])


async def create_book(
    pool: asyncpg.Pool,
    payload: schemas.CreateBookRequest,
) -> schemas.BookCreatedResponse:
    row = await repository.create_book(
        pool,
        book_id=uuid4(),
        title=payload.title,
        author_id=payload.author_id,
        created_at=_utc_now(),
    )
    logger.info("book_created book_id=%s author_id=%s", row["id"], row["author_id"])
    return schemas.BookCreatedResponse(
        book_id=row["id"],
        title=str(row["title"]),
        author_id=row["author_id"],
        created_at=row["created_at"],
    )


async def delete_book(pool: asyncpg.Pool, payload: schemas.DeleteBookRequest) -> bool:
    book_id = ids.parse_id(payload.id, entity="book")
    deleted = await repository.delete_book(pool, book_id)
    logger.info("book_deleted book_id=%s rows=%s", book_id, deleted)
    return deleted > 0

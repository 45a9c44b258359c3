"""
Author business logic.

Ids and timestamps are generated here, not by the database, so the create
response can always report them.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import asyncpg
from fastapi import HTTPException, status

from bookstore_api.core import ids

from . import repository, schemas

logger = logging.getLogger(__name__)

SEED_AUTHORS: tuple[tuple[str, str], ...] = (
    ("JRR Tolkien", "British"),
    ("Herman Melville", "American"),
    ("Machado de Assis", "Brazilian"),
    ("Fyodor Dostoevsky", "Russian"),
    ("Jane Austen", "British"),
    ("Gabriel Garcia Marquez", "Colombian"),
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def authors_index(pool: asyncpg.Pool) -> list[schemas.AuthorSummary]:
    rows = await repository.list_authors(pool)
    return [
        schemas.AuthorSummary(name=str(row["name"]), nationality=str(row["nationality"]))
        for row in rows
    ]


async def show_author(pool: asyncpg.Pool, raw_author_id: str) -> schemas.AuthorResponse:
    author_id = ids.parse_id(raw_author_id, entity="author")
    row = await repository.get_author_by_id(pool, author_id)
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Author not found.",
        )
    return schemas.AuthorResponse(
        id=row["id"],
        name=str(row["name"]),
        nationality=str(row["nationality"]),
    )


async def create_author(
    pool: asyncpg.Pool,
    payload: schemas.CreateAuthorRequest,
) -> schemas.AuthorCreatedResponse:
    row = await repository.create_author(
        pool,
        author_id=uuid4(),
        name=payload.name,
        nationality=payload.nationality,
        created_at=_utc_now(),
    )
    logger.info("author_created author_id=%s", row["id"])
    return schemas.AuthorCreatedResponse(
        author_id=row["id"],
        name=str(row["name"]),
        nationality=str(row["nationality"]),
        created_at=row["created_at"],
    )


async def delete_author(pool: asyncpg.Pool, payload: schemas.DeleteAuthorRequest) -> bool:
    """
    Delete one author by id. Returns whether a row was removed.

    A missing row is not an error: deleting twice succeeds both times.
    """
    author_id = ids.parse_id(payload.id, entity="author")
    deleted = await repository.delete_author(pool, author_id)
    logger.info("author_deleted author_id=%s rows=%s", author_id, deleted)
    return deleted > 0


async def seed_authors(pool: asyncpg.Pool) -> schemas.SeedAuthorsResponse:
    """
    Insert the sample authors in a single statement.

    Timestamps step by one microsecond so the list view keeps the seed order.
    """
    started_at = _utc_now()
    rows = [
        {
            "id": uuid4(),
            "name": name,
            "nationality": nationality,
            "created_at": started_at + timedelta(microseconds=position),
        }
        for position, (name, nationality) in enumerate(SEED_AUTHORS)
    ]
    seeded = await repository.create_authors(pool, rows)
    logger.info("authors_seeded count=%s", seeded)
    return schemas.SeedAuthorsResponse(seeded=seeded)

"""
Author API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from bookstore_api.core import db

from . import schemas, service

router = APIRouter()


@router.get("/authors")
async def authors_index(
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[schemas.AuthorSummary]:
    return await service.authors_index(pool)


@router.post("/authors/create")
async def create_author(
    request: schemas.CreateAuthorRequest,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.AuthorCreatedResponse:
    return await service.create_author(pool, request)


@router.post("/authors/delete", response_class=PlainTextResponse)
async def delete_author(
    request: schemas.DeleteAuthorRequest,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> str:
    await service.delete_author(pool, request)
    return "Author deleted successfully!\n"


@router.get("/authors/{author_id}")
async def show_author(
    author_id: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.AuthorResponse:
    return await service.show_author(pool, author_id)


@router.get("/seed_authors")
async def seed_authors(
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.SeedAuthorsResponse:
    return await service.seed_authors(pool)

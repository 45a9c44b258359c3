"""
Book API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from bookstore_api.core import db

from . import schemas, service

router = APIRouter()


@router.get("/books")
async def books_index(
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[schemas.BookSummary]:
    return await service.books_index(pool)


@router.post("/books/create")
async def create_book(
    request: schemas.CreateBookRequest,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.BookCreatedResponse:
    return await service.create_book(pool, request)


@router.post("/books/delete", response_class=PlainTextResponse)
async def delete_book(
    request: schemas.DeleteBookRequest,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> str:
    await service.delete_book(pool, request)
    return "Book deleted successfully!\n"


@router.get("/books/{book_id}")
async def show_book(
    book_id: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.BookResponse:
    return await service.show_book(pool, book_id)

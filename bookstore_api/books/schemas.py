"""
Book API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, field_validator

from bookstore_api.core.validation import require_text


class CreateBookRequest(BaseModel):
    title: str
    author_id: UUID

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        return require_text(value)


class DeleteBookRequest(BaseModel):
    id: str


class BookSummary(BaseModel):
    title: str
    author_id: UUID


class BookResponse(BaseModel):
    id: UUID
    title: str
    author_id: UUID


class BookCreatedResponse(BaseModel):
    book_id: UUID
    title: str
    author_id: UUID
    created_at: datetime

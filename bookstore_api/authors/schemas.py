"""
Author API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, field_validator

from bookstore_api.core.validation import require_text


class CreateAuthorRequest(BaseModel):
    name: str
    nationality: str

    @field_validator("name", "nationality")
    @classmethod
    def check_text(cls, value: str) -> str:
        return require_text(value)


class DeleteAuthorRequest(BaseModel):
    # Kept as text so a malformed id gets the same 400 as the show route.
    id: str


class AuthorSummary(BaseModel):
    name: str
    nationality: str


class AuthorResponse(BaseModel):
    id: UUID
    name: str
    nationality: str


class AuthorCreatedResponse(BaseModel):
    author_id: UUID
    name: str
    nationality: str
    created_at: datetime


class SeedAuthorsResponse(BaseModel):
    seeded: int

"""
User API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, field_validator

from bookstore_api.core.validation import require_text


class CreateUserRequest(BaseModel):
    name: str
    email: EmailStr

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return require_text(value)


class UserCreatedResponse(BaseModel):
    user_id: UUID
    name: str
    email: str
    created_at: datetime

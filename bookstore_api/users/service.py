"""
User business logic.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import uuid4

import asyncpg

from . import repository, schemas

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def create_user(
    pool: asyncpg.Pool,
    payload: schemas.CreateUserRequest,
) -> schemas.UserCreatedResponse:
    # Email syntax is already checked by the request schema (EmailStr).
    row = await repository.create_user(
        pool,
        user_id=uuid4(),
        name=payload.name,
        email=str(payload.email),
        created_at=_utc_now(),
    )
    logger.info("user_created user_id=%s", row["id"])
    return schemas.UserCreatedResponse(
        user_id=row["id"],
        name=str(row["name"]),
        email=str(row["email"]),
        created_at=row["created_at"],
    )

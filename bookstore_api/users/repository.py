"""
User persistence (raw SQL).
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

import asyncpg

from bookstore_api.core import db


async def create_user(
    pool: asyncpg.Pool,
    *,
    user_id: UUID,
    name: str,
    email: str,
    created_at: datetime,
) -> dict:
    row = await db.fetch_one(
        pool,
        """
        INSERT INTO users (id, name, email, created_at)
        VALUES ($1, $2, $3, $4)
        RETURNING id, name, email, created_at
        """,
        user_id,
        name,
        email,
        created_at,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row

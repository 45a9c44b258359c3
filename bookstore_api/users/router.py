"""
User API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends

from bookstore_api.core import db

from . import schemas, service

router = APIRouter()


@router.post("/users/create")
async def create_user(
    request: schemas.CreateUserRequest,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.UserCreatedResponse:
    return await service.create_user(pool, request)

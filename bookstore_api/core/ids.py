"""
Identifier parsing.

Entity ids are UUIDs. They arrive as plain strings (path segments, JSON
bodies) and must parse before any SQL runs.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import HTTPException, status


def parse_id(raw: str | None, *, entity: str) -> UUID:
    """
    Parse `raw` into a UUID or raise a 400 naming the entity.

    Never falls back to a default id: a malformed value must not reach a
    DELETE or SELECT.
    """
    value = (raw or "").strip()
    try:
        return UUID(value)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {entity} id.",
        ) from exc

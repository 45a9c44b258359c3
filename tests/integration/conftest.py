"""
Fixtures for tests that run against a real PostgreSQL.

Set TEST_DATABASE_URL to a database the tests may freely write to; the
tables are created if missing and truncated before every test.
"""

from __future__ import annotations

import asyncio
import os

import asyncpg
import pytest
from fastapi.testclient import TestClient

from bookstore_api.main import create_app

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "").strip()

SCHEMA = """
CREATE TABLE IF NOT EXISTS authors (
    id uuid PRIMARY KEY,
    name text NOT NULL,
    nationality text NOT NULL,
    created_at timestamptz NOT NULL
);
CREATE TABLE IF NOT EXISTS books (
    id uuid PRIMARY KEY,
    title text NOT NULL,
    author_id uuid NOT NULL,
    created_at timestamptz NOT NULL
);
CREATE TABLE IF NOT EXISTS users (
    id uuid PRIMARY KEY,
    name text NOT NULL,
    email text NOT NULL,
    created_at timestamptz NOT NULL
);
"""


async def _run(sql: str, *args):
    conn = await asyncpg.connect(TEST_DATABASE_URL)
    try:
        return await conn.fetch(sql, *args)
    finally:
        await conn.close()


async def _reset() -> None:
    conn = await asyncpg.connect(TEST_DATABASE_URL)
    try:
        await conn.execute(SCHEMA)
        await conn.execute("TRUNCATE authors, books, users")
    finally:
        await conn.close()


@pytest.fixture
def query():
    """Run SQL against the test database from a sync test."""

    def run(sql: str, *args) -> list[dict]:
        return [dict(r) for r in asyncio.run(_run(sql, *args))]

    return run


@pytest.fixture
def client(monkeypatch):
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL is not set")
    monkeypatch.setenv("DATABASE_URL", TEST_DATABASE_URL)
    asyncio.run(_reset())

    # Entering the context runs the lifespan, so the real pool is used.
    with TestClient(create_app()) as test_client:
        yield test_client

"""
Shared fixtures.

Unit tests never touch PostgreSQL: the pool dependency is overridden with a
placeholder and the repository functions are swapped for an in-memory store.
"""

from __future__ import annotations

from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from bookstore_api.authors import repository as authors_repository
from bookstore_api.books import repository as books_repository
from bookstore_api.core import db
from bookstore_api.core.errors import StoreError
from bookstore_api.main import create_app
from bookstore_api.users import repository as users_repository

FAKE_POOL = object()


class InMemoryStore:
    """
    Stand-in for the three tables. Rows keep insertion order, like
    `ORDER BY created_at` does for sequential requests.
    """

    def __init__(self) -> None:
        self.authors: list[dict] = []
        self.books: list[dict] = []
        self.users: list[dict] = []
        self.calls: list[str] = []
        self.rejected_names: set[str] = set()

    # authors
    async def list_authors(self, pool) -> list[dict]:
        self.calls.append("list_authors")
        return [{"name": r["name"], "nationality": r["nationality"]} for r in self.authors]

    async def get_author_by_id(self, pool, author_id: UUID) -> dict | None:
        self.calls.append("get_author_by_id")
        return next((dict(r) for r in self.authors if r["id"] == author_id), None)

    async def create_author(self, pool, *, author_id, name, nationality, created_at) -> dict:
        self.calls.append("create_author")
        row = {"id": author_id, "name": name, "nationality": nationality, "created_at": created_at}
        self.authors.append(row)
        return dict(row)

    async def create_authors(self, pool, rows: list[dict]) -> int:
        # One statement: stage every row, commit only if all are accepted.
        self.calls.append("create_authors")
        staged = []
        for row in rows:
            if row["name"] in self.rejected_names:
                raise StoreError("constraint", "execute")
            staged.append(dict(row))
        self.authors.extend(staged)
        return len(staged)

    async def delete_author(self, pool, author_id: UUID) -> int:
        self.calls.append("delete_author")
        before = len(self.authors)
        self.authors = [r for r in self.authors if r["id"] != author_id]
        return before - len(self.authors)

    # books
    async def list_books(self, pool) -> list[dict]:
        self.calls.append("list_books")
        return [{"title": r["title"], "author_id": r["author_id"]} for r in self.books]

    async def get_book_by_id(self, pool, book_id: UUID) -> dict | None:
        self.calls.append("get_book_by_id")
        return next((dict(r) for r in self.books if r["id"] == book_id), None)

    async def create_book(self, pool, *, book_id, title, author_id, created_at) -> dict:
        self.calls.append("create_book")
        row = {"id": book_id, "title": title, "author_id": author_id, "created_at": created_at}
        self.books.append(row)
        return dict(row)

    async def delete_book(self, pool, book_id: UUID) -> int:
        self.calls.append("delete_book")
        before = len(self.books)
        self.books = [r for r in self.books if r["id"] != book_id]
        return before - len(self.books)

    # users
    async def create_user(self, pool, *, user_id, name, email, created_at) -> dict:
        self.calls.append("create_user")
        row = {"id": user_id, "name": name, "email": email, "created_at": created_at}
        self.users.append(row)
        return dict(row)


@pytest.fixture
def store(monkeypatch) -> InMemoryStore:
    fake = InMemoryStore()
    for name in ("list_authors", "get_author_by_id", "create_author", "create_authors", "delete_author"):
        monkeypatch.setattr(authors_repository, name, getattr(fake, name))
    for name in ("list_books", "get_book_by_id", "create_book", "delete_book"):
        monkeypatch.setattr(books_repository, name, getattr(fake, name))
    monkeypatch.setattr(users_repository, "create_user", fake.create_user)
    return fake


@pytest.fixture
def app(store):
    test_app = create_app()
    test_app.dependency_overrides[db.get_pool] = lambda: FAKE_POOL
    return test_app


@pytest.fixture
def client(app) -> TestClient:
    # Not used as a context manager: the lifespan (real pool) must not run.
    return TestClient(app)

"""
Shared fixtures: in-memory fakes for the cache store and the origin.
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from article_cache.api.app import create_app
from article_cache.api.dependencies import AppContext, get_context
from article_cache.config import Settings
from article_cache.errors import OriginError
from article_cache.services import CacheAccessor


class InMemoryKeyValueStore:
    """Dict-backed KeyValueStore."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.puts: list[str] = []
        self.error: Exception | None = None

    async def get(self, key: str) -> str | None:
        if self.error:
            raise self.error
        return self.data.get(key)

    async def put(self, key: str, value: str) -> None:
        if self.error:
            raise self.error
        self.puts.append(key)
        self.data[key] = value

    async def delete(self, key: str) -> None:
        if self.error:
            raise self.error
        self.data.pop(key, None)


class FakeOrigin:
    """List-backed OriginStore that records every call."""

    def __init__(self, rows: list[dict[str, Any]] | None = None) -> None:
        self.rows = [dict(row) for row in rows or []]
        self.calls: list[tuple[str, ...]] = []
        self.error: OriginError | None = None

    def _check(self) -> None:
        if self.error:
            raise self.error

    async def select_all(self, table: str) -> list[dict[str, Any]]:
        self.calls.append(("select_all", table))
        self._check()
        return [dict(row) for row in self.rows]

    async def select_by_id(self, table: str, record_id: Any) -> dict[str, Any] | None:
        self.calls.append(("select_by_id", table, str(record_id)))
        self._check()
        for row in self.rows:
            if str(row.get("id")) == str(record_id):
                return dict(row)
        return None

    async def insert(self, table: str, fields: dict[str, Any]) -> list[dict[str, Any]]:
        self.calls.append(("insert", table))
        self._check()
        row = {"id": len(self.rows) + 1, **fields}
        self.rows.append(row)
        return [dict(row)]


@pytest.fixture
def articles():
    """Origin rows used by most tests."""
    return [
        {"id": 1, "title": "A", "content": "first"},
        {"id": 2, "title": "B", "content": "second"},
    ]


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def origin(articles):
    return FakeOrigin(articles)


@pytest.fixture
def cache(store):
    return CacheAccessor(store)


@pytest.fixture
def context(store, origin):
    return AppContext.create(Settings(), store, origin)


@pytest.fixture
def client(context):
    """Create a test client wired to the in-memory fakes."""
    app = create_app(context.settings)
    app.dependency_overrides[get_context] = lambda: context
    return TestClient(app)

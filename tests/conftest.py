"""Test configuration and fixtures for the users API test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from usuarios_api.api import create_api
from usuarios_api.database import BaseSchema, DatabaseService
from usuarios_api.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator

IN_MEMORY_URL = "sqlite+pysqlite:///:memory:"


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", IN_MEMORY_URL)
    monkeypatch.setenv("PUBLIC_URL", "http://localhost:8000")
    monkeypatch.delenv("DATABASE_FAIL_FAST", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database() -> Iterator[DatabaseService]:
    """SQLite in-memory store with the ``usuarios`` table created."""
    db = DatabaseService(IN_MEMORY_URL)
    BaseSchema.metadata.create_all(db.engine)
    yield db
    db.dispose()


@pytest.fixture
def client(database: DatabaseService) -> Iterator[TestClient]:
    app = create_api(database=database)
    with TestClient(app) as test_client:
        yield test_client

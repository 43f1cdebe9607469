"""Shared fixtures: an in-memory database and a fake Unsplash client.

The environment is set before ``app`` is imported so the module-level
settings and engine pick up the test values.
"""
import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["UNSPLASH_ACCESS_KEY"] = "test-access-key"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.unsplash_client import get_unsplash_client


class FakeUnsplashClient:
    """Stands in for UnsplashClient; records queries and returns canned results."""

    def __init__(self):
        self.results: list[dict] = []
        self.error: Exception | None = None
        self.queries: list[str] = []

    async def __aenter__(self) -> "FakeUnsplashClient":
        return self

    async def __aexit__(self, *exc) -> None:
        pass

    async def search_photos(self, query: str) -> list[dict]:
        self.queries.append(query)
        if self.error:
            raise self.error
        return self.results


@pytest.fixture
def fake_unsplash() -> FakeUnsplashClient:
    return FakeUnsplashClient()


@pytest.fixture
def test_client(fake_unsplash):
    """TestClient bound to a fresh in-memory database per test.

    The lifespan creates the tables on enter and disposes the engine on
    exit, which drops the in-memory database.
    """
    app.dependency_overrides[get_unsplash_client] = lambda: (lambda: fake_unsplash)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def user(test_client) -> dict:
    resp = test_client.post(
        "/create/user", json={"username": "alice", "email": "alice@example.com"}
    )
    assert resp.status_code == 200
    return resp.json()["user"]


@pytest.fixture
def make_photo(test_client, user):
    """Factory that saves a photo for the fixture user and returns its JSON."""

    def _make(tags=None, suffix="x", **overrides) -> dict:
        payload = {
            "imageUrl": f"https://images.unsplash.com/{suffix}",
            "description": f"photo {suffix}",
            "altDescription": f"alt {suffix}",
            "userId": user["id"],
            "tags": tags if tags is not None else [],
        }
        payload.update(overrides)
        resp = test_client.post("/create/photo", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()["photo"]

    return _make

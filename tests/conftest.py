"""
Notes API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh for each test):
    ├── note_store:   Store in its startup state (welcome note, id 1)
    ├── empty_store:  Store with no notes
    ├── app:          FastAPI app built around `note_store`
    └── test_client:  HTTPX AsyncClient routed straight into `app`
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["PORT"] = "3000"

from notes_api.config import Settings  # noqa: E402
from notes_api.main import create_app  # noqa: E402
from notes_api.services.note_store import NoteStore  # noqa: E402


@pytest.fixture
def note_store():
    """A store in its startup state: [{id: 1, text: "Welcome to Codespace demo!"}]."""
    return NoteStore.seeded()


@pytest.fixture
def empty_store():
    """A store holding no notes."""
    return NoteStore()


@pytest.fixture
def app(note_store):
    """A fresh application instance that owns `note_store`."""
    return create_app(settings=Settings(), store=note_store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

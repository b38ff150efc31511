"""
NoteFlow Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (stores, app, HTTP client).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── memory_store: InMemoryStore, empty
    ├── json_store: JsonFileStore under tmp_path
    ├── sample_notes: Two stored note records
    ├── app: FastAPI app wired to memory_store
    └── test_client: HTTPX AsyncClient talking to `app` in-process
"""

import os
import tempfile

# Override settings for testing BEFORE any noteflow imports
# Why: The settings singleton is built at import time
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["DATA_FILE"] = os.path.join(tempfile.mkdtemp(prefix="noteflow_test_"), "notes.json")
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from noteflow.main import create_app
from noteflow.services.json_store import JsonFileStore
from noteflow.services.memory_store import InMemoryStore


@pytest.fixture
def sample_notes():
    """Two records shaped exactly as the server stores them."""
    return [
        {
            "id": "a1b2c3d4-0000-4000-8000-000000000001",
            "title": "Groceries",
            "content": "milk, eggs, bread",
            "color": "#ffffff",
            "createdAt": "2024-01-15T12:00:00.000Z",
        },
        {
            "id": "a1b2c3d4-0000-4000-8000-000000000002",
            "title": "Ideas",
            "content": "Write a note-taking app",
            "color": "#fde68a",
            "createdAt": "2024-01-16T08:30:00.000Z",
            "updatedAt": "2024-01-16T09:00:00.000Z",
        },
    ]


@pytest.fixture
def memory_store():
    """An empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def json_store(tmp_path):
    """
    A JSON file store in a fresh temporary directory.

    The data directory does not exist yet, so tests also cover creation.
    """
    return JsonFileStore(str(tmp_path / "data" / "notes.json"))


@pytest.fixture
def app(memory_store):
    """FastAPI app backed by memory_store."""
    return create_app(store=memory_store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app, without a
    server or lifespan events.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

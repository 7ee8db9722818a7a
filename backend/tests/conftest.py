"""
Blog Post API — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_store: AsyncMock standing in for PostStore (no database)
    ├── sample_post_document: One stored-shape post document
    ├── db_tables: Fresh SQLite tables, dropped and engine disposed afterwards
    │   ├── open_store: Factory for a store on its own fresh session
    │   ├── post_store: Store bound to one session for the whole test
    │   ├── seeded_posts: Ten generated posts inserted via insert_many
    │   └── test_client: HTTPX AsyncClient talking to the FastAPI app
"""

import os
import random
import tempfile
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from typing import AsyncIterator
from unittest.mock import AsyncMock

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///"
    + os.path.join(tempfile.mkdtemp(prefix="blogposts_test_"), "test.db")
)
os.environ["CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.database import async_session_factory, create_tables, dispose_engine, drop_tables
from app.services.sql_post_store import SQLAlchemyPostStore
from app.services.store_base import PostStore


FIRST_NAMES = ["Ada", "Grace", "Alan", "Barbara", "Edsger", "Margaret", "Donald", "Frances"]
LAST_NAMES = ["Lovelace", "Hopper", "Turing", "Liskov", "Dijkstra", "Hamilton", "Knuth", "Allen"]
WORDS = ["lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing", "elit"]


def generate_post_data() -> dict:
    """A valid stored-shape post with randomized fields and a past `created`."""
    return {
        "author": {
            "firstName": random.choice(FIRST_NAMES),
            "lastName": random.choice(LAST_NAMES),
        },
        "title": " ".join(random.sample(WORDS, 3)),
        "content": "\n\n".join(
            " ".join(random.choices(WORDS, k=12)) for _ in range(3)
        ),
        "created": datetime.now(timezone.utc) - timedelta(days=random.randint(1, 365)),
    }


# ══════════════════════════════════════════════════════════════════════════
# Store doubles (no database)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_store():
    """
    AsyncMock implementing the PostStore interface.

    Usage:
        async def test_get(mock_store, sample_post_document):
            mock_store.find_by_id.return_value = sample_post_document
    """
    return AsyncMock(spec=PostStore)


@pytest.fixture
def make_post_data():
    """Factory for randomized, valid stored-shape posts."""
    return generate_post_data


@pytest.fixture
def sample_post_document():
    """One post as the store hands it out."""
    return {
        "id": str(uuid.uuid4()),
        "author": {"firstName": "Ada", "lastName": "Lovelace"},
        "title": "Notes on the Analytical Engine",
        "content": "The engine weaves algebraic patterns.",
        "created": datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
    }


# ══════════════════════════════════════════════════════════════════════════
# SQLite-backed fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_tables():
    """Creates the tables for one test and tears them down afterwards."""
    await create_tables()
    yield
    await drop_tables()
    # Pooled connections must not outlive this test's event loop
    await dispose_engine()


@pytest.fixture
def open_store(db_tables):
    """
    Factory yielding a store on a brand-new session.

    Use it to read back state after an HTTP call: a fresh session cannot
    serve stale rows from an earlier identity map.
    """

    @asynccontextmanager
    async def _open() -> AsyncIterator[SQLAlchemyPostStore]:
        async with async_session_factory() as session:
            yield SQLAlchemyPostStore(session)

    return _open


@pytest_asyncio.fixture
async def post_store(db_tables):
    """A store bound to one session for the whole test."""
    async with async_session_factory() as session:
        yield SQLAlchemyPostStore(session)


@pytest_asyncio.fixture
async def seeded_posts(open_store):
    """Inserts ten generated posts and returns their stored documents."""
    async with open_store() as store:
        return await store.insert_many([generate_post_data() for _ in range(10)])


@pytest_asyncio.fixture
async def test_client(db_tables):
    """
    HTTPX AsyncClient routed straight into the FastAPI app (no server).

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/posts")
            assert response.status_code == 200
    """
    from app.main import app
    # Unhandled errors come back as the 500 response a real server would send
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

"""
Pytest configuration and shared fixtures
"""
import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from mongomock_motor import AsyncMongoMockClient
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import ConnectionFailure

# Project modules live at the repository root
sys.path.insert(0, str(Path(__file__).parent.parent))


def make_cursor(docs=None):
    """A motor-like cursor: chaining methods return itself, to_list is awaited"""
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=list(docs or []))
    return cursor


@pytest.fixture
def cursor():
    return make_cursor()


@pytest.fixture
def books(cursor):
    """Mocked books collection whose find() and aggregate() return `cursor`"""
    collection = MagicMock()
    collection.name = "books"
    collection.find.return_value = cursor
    collection.aggregate.return_value = cursor
    collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1, modified_count=1))
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    collection.create_index = AsyncMock(side_effect=["title_1", "author_1_published_year_-1"])
    collection.database.command = AsyncMock(return_value={"executionStats": {}})
    return collection


# =============================================================================
# Backing stores for data-level tests
# =============================================================================

TEST_URI = os.getenv("MONGODB_TEST_URI", "mongodb://127.0.0.1:27017")
TEST_DB_NAME = os.getenv("MONGODB_TEST_DB_NAME", "plp_bookstore_test")


async def connect_live_client():
    """Motor client for MONGODB_TEST_URI; skips the test when nothing answers"""
    client = AsyncIOMotorClient(TEST_URI, serverSelectionTimeoutMS=1000)
    try:
        await client.admin.command("ping")
    except ConnectionFailure:
        client.close()
        pytest.skip(f"MongoDB is not reachable at {TEST_URI}")
    return client


@pytest.fixture(params=["memory", "live"])
async def store_books(request):
    """
    An empty, uniquely named books collection.

    "memory" runs in-process on mongomock-motor; "live" needs a server and is
    dropped afterwards.
    """
    name = f"books_{uuid4().hex[:8]}"
    if request.param == "memory":
        yield AsyncMongoMockClient()[TEST_DB_NAME][name]
        return

    client = await connect_live_client()
    collection = client[TEST_DB_NAME][name]
    yield collection

    await collection.drop()
    client.close()


@pytest.fixture
async def seeded_books(store_books):
    from seed_books import seed_books, SAMPLE_BOOKS

    await seed_books(store_books, SAMPLE_BOOKS)
    return store_books

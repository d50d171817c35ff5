"""
Fixtures for tests that need a live MongoDB server

Set MONGODB_TEST_URI to point at a disposable server; tests are skipped
when nothing answers.
"""
from uuid import uuid4

import pytest

from tests.conftest import TEST_DB_NAME, connect_live_client


@pytest.fixture
async def live_books():
    """A uniquely named collection seeded with the sample catalog, dropped afterwards"""
    from seed_books import seed_books, SAMPLE_BOOKS

    client = await connect_live_client()
    collection = client[TEST_DB_NAME][f"books_{uuid4().hex[:8]}"]
    await seed_books(collection, SAMPLE_BOOKS)
    yield collection

    await collection.drop()
    client.close()

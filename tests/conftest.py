"""
Shared pytest fixtures and configuration for all tests.
"""

import sys
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
import strawberry

# Add src directory to path so imports work without an install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bookshelf.store import DocumentStore  # noqa: E402

MEMORY_DATABASE_URL = "sqlite:///:memory:"


@pytest_asyncio.fixture
async def store() -> AsyncGenerator[DocumentStore, None]:
    """Provide an open document store on a fresh in-memory database."""
    store = DocumentStore(MEMORY_DATABASE_URL)
    store.open()
    await store.create_collections()
    try:
        yield store
    finally:
        if store.is_open:
            await store.drop_collections()
        await store.close()


@pytest.fixture
def mock_store() -> MagicMock:
    """A store whose collection primitives are all AsyncMocks."""
    store = MagicMock(spec=DocumentStore)
    for name in ("authors", "books", "notes"):
        collection = MagicMock()
        collection.find_by_id = AsyncMock(return_value=None)
        collection.find = AsyncMock(return_value=[])
        collection.save = AsyncMock()
        collection.update_first = AsyncMock(return_value=None)
        collection.remove = AsyncMock()
        setattr(store, name, collection)
    return store


@pytest.fixture
def mock_info(mock_store: MagicMock) -> Any:
    """Create a mock GraphQL info object with the store in its context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": mock_store}
    return info


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")

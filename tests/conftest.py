"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
import strawberry

from contactbook.database.gateway import StorageGateway


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """URL of a fresh SQLite database file for this test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'contacts.db'}"


@pytest_asyncio.fixture
async def gateway(database_url: str) -> AsyncGenerator[StorageGateway, None]:
    """Provide a storage gateway with the contacts table created."""
    from contactbook.database.connection import open_gateway

    async with open_gateway(database_url) as opened:
        yield opened


@pytest.fixture
def mock_gateway() -> MagicMock:
    """A storage gateway whose coroutines are AsyncMocks."""
    mock = MagicMock(spec=StorageGateway)
    mock.execute = AsyncMock()
    mock.fetch_one = AsyncMock()
    mock.fetch_all = AsyncMock()
    return mock


@pytest.fixture
def mock_info(mock_gateway: MagicMock) -> MagicMock:
    """Create a mock GraphQL info object with the gateway in its context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"gateway": mock_gateway}
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")

"""Pytest configuration for async testing.

This configuration ensures:
1. Async tests are marked for pytest-asyncio
2. Database fixtures use a fresh SQLite file per test
3. Redis fixtures use an in-memory fakeredis server per test
4. Logger fixtures capture structured calls without output
"""

import asyncio
from unittest.mock import Mock

import pytest
import pytest_asyncio

from src.domain.protocols.logger_protocol import LoggerProtocol


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if asyncio.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture
def mock_logger():
    """Logger double implementing LoggerProtocol.

    bind() returns the same mock so calls made through a bound logger are
    still visible on the fixture.
    """
    logger = Mock(spec=LoggerProtocol)
    logger.bind.return_value = logger
    return logger


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a Database on a fresh SQLite file with all tables created.

    Each test gets its own file, so no data persists between tests.
    """
    from src.infrastructure.persistence import Database

    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'seedbed_test.db'}")
    await db.create_all()

    yield db

    await db.drop_all()
    await db.close()


@pytest_asyncio.fixture
async def fakeredis_client():
    """Create fakeredis client for document store testing.

    Returns:
        fakeredis.aioredis.FakeRedis instance (in-memory Redis emulation)
    """
    import fakeredis.aioredis

    client = fakeredis.aioredis.FakeRedis(decode_responses=True)

    yield client

    await client.flushall()
    await client.aclose()


@pytest.fixture
def document_keys():
    """Key builder with a test prefix."""
    from src.infrastructure.documents import DocumentKeys

    return DocumentKeys(prefix="test")

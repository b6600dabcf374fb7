"""Pytest configuration shared by all test suites.

- Forces the testing environment before any bookstore module reads settings
- Provides a fresh SQLite database per test (integration tests)
- Provides a dispatcher wired to that database
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("EMAIL_BACKEND", "stub")

from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from bookstore.application.dispatcher import Dispatcher  # noqa: E402
from bookstore.core.container.handler_factory import create_handler  # noqa: E402
from bookstore.infrastructure.events import InMemoryEventBus  # noqa: E402
from bookstore.infrastructure.persistence import Database  # noqa: E402


@pytest.fixture
def mock_logger():
    """Logger double satisfying LoggerProtocol."""
    return Mock()


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Fresh SQLite database with all tables, disposed after the test."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'bookstore.db'}")
    await database.create_all()
    yield database
    await database.close()


@pytest.fixture
def event_bus(mock_logger):
    """In-memory event bus with no subscribers."""
    return InMemoryEventBus(logger=mock_logger, publish_timeout=5.0)


@pytest.fixture
def dispatcher(test_database, event_bus, mock_logger):
    """Dispatcher running real handlers against the test database."""
    return Dispatcher(
        database=test_database,
        event_bus=event_bus,
        logger=mock_logger,
        handler_builder=create_handler,
        request_timeout=10.0,
    )

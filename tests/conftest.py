"""Pytest configuration.

- Test settings are pinned through the environment before ``src`` is
  imported (settings are read once per process).
- Async test functions are auto-marked for pytest-asyncio.
- Integration tests run only when TEST_DATABASE_URL points at PostgreSQL.
"""

import asyncio
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("APP_KEY", "test-app-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH_THROTTLE_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
if os.environ.get("TEST_DATABASE_URL"):
    os.environ["DATABASE_URL"] = os.environ["TEST_DATABASE_URL"]

from unittest.mock import AsyncMock, Mock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "smoke: End-to-end account lifecycle tests")


def pytest_collection_modifyitems(config, items):
    """Auto-mark async tests; skip integration tests without a database."""
    skip_integration = pytest.mark.skip(reason="TEST_DATABASE_URL not set")
    for item in items:
        if asyncio.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
        if "integration" in item.keywords and not os.environ.get("TEST_DATABASE_URL"):
            item.add_marker(skip_integration)


# =============================================================================
# Reusable Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Mock logger with the LoggerProtocol methods.

    Usage:
        def test_something(mock_logger):
            service = MyService(logger=mock_logger)
            service.do_something()
            mock_logger.info.assert_called_once()
    """
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    logger.critical = Mock()
    return logger


@pytest.fixture
def mock_event_bus():
    """Event bus mock; ``publish`` is awaited by handlers."""
    event_bus = AsyncMock()
    event_bus.publish = AsyncMock(return_value=None)
    return event_bus


@pytest_asyncio.fixture
async def test_database():
    """Database on TEST_DATABASE_URL with a fresh schema per test.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                ...
    """
    from src.infrastructure.persistence.database import Database

    db = Database(database_url=os.environ["TEST_DATABASE_URL"])
    await db.drop_all()
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()

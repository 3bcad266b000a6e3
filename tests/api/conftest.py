"""Fixtures for HTTP tests.

Handler factories are replaced through ``app.dependency_overrides`` so
routes run without a database or Redis.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from src.main import app


@pytest.fixture
def client():
    """TestClient that renders unhandled errors as responses."""
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def override_handler():
    """Replace a handler factory with an AsyncMock handler.

    Usage:
        handler = override_handler(get_login_user_handler, Success(value=...))
    """

    def _override(factory, result):
        handler = AsyncMock()
        handler.handle.return_value = result
        app.dependency_overrides[factory] = lambda: handler
        return handler

    return _override

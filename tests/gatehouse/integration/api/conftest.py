"""Pytest fixtures for API integration tests.

The app runs against a file-backed SQLite database under tmp_path. The
lifespan creates the schema when the TestClient context is entered.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from gatehouse.presentation.api.app import API_V1_PREFIX, create_app
from gatehouse_config.settings import Settings
from tests.shared.fixtures.settings import TEST_JWT_SECRET


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_backend="sqlite",
        sqlite_path=str(tmp_path / "gatehouse-test.db"),
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        # Minimum work factor keeps the tests fast
        bcrypt_rounds=4,
        registration_enabled=True,
    )


@pytest.fixture
def app(api_settings):
    return create_app(api_settings)


@pytest.fixture
def test_client(app):
    """TestClient with the lifespan running.

    Server errors are returned as responses instead of being re-raised
    so tests can assert on the 500 body.
    """
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
    app.dependency_overrides.clear()

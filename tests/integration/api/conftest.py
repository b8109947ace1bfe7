"""Pytest fixtures for API integration tests.

The application runs its real lifespan against a throwaway SQLite file,
so tables are created exactly as in production.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from todolist.presentation.api.app import create_app
from todolist_config import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105


@pytest.fixture
def api_prefix() -> str:
    return "/api"


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        _env_file=None,
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_url_override=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        bcrypt_rounds=4,
        api_prefix="/api",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        enforce_todo_ownership=True,
        log_level="WARNING",
    )


@pytest.fixture
def test_client(api_settings):
    """Client whose context runs startup and shutdown."""
    with TestClient(create_app(settings=api_settings)) as client:
        yield client


@pytest.fixture
def register_user(test_client, api_prefix):
    """Register a user and return the response body."""

    def _register(name: str, email: str, password: str) -> dict:
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _register


@pytest.fixture
def registered_user_data() -> dict:
    return {"name": "Mario", "email": "mario@test.it", "password": "pw123"}


@pytest.fixture
def auth_headers(register_user, registered_user_data) -> dict:
    """Auth headers for a freshly registered user."""
    body = register_user(**registered_user_data)
    return {"Authorization": f"Bearer {body['data']['token']}"}


@pytest.fixture
def other_auth_headers(register_user) -> dict:
    body = register_user("Luigi", "luigi@test.it", "pw456")
    return {"Authorization": f"Bearer {body['data']['token']}"}

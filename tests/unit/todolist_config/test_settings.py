"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from todolist_config import Settings, clear_settings_cache, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "DATABASE_URL",
        "JWT_SECRET_KEY",
        "JWT_TTL_SECONDS",
        "API_PREFIX",
        "ENFORCE_TODO_OWNERSHIP",
        "POSTGRES_PASSWORD",
        "POSTGRES_HOST",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettingsDefaults:
    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None, jwt_secret_key="secret")

        assert settings.jwt_ttl_seconds == 3600
        assert settings.bcrypt_rounds == 10
        assert settings.api_port == 5000
        assert settings.api_prefix == "/api"
        assert settings.enforce_todo_ownership is True
        assert settings.api_debug is False

    def test_secret_is_not_exposed_in_repr(self, clean_env):
        settings = Settings(_env_file=None, jwt_secret_key="super-secret")

        assert "super-secret" not in repr(settings)
        assert settings.jwt_secret_key.get_secret_value() == "super-secret"

    def test_missing_jwt_secret_fails(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_non_positive_ttl_rejected(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, jwt_secret_key="s", jwt_ttl_seconds=0)


class TestDatabaseUrl:
    def test_built_from_postgres_components(self, clean_env):
        settings = Settings(
            _env_file=None,
            jwt_secret_key="s",
            postgres_host="db",
            postgres_password="pw",
        )

        assert settings.database_url == "postgresql+asyncpg://postgres:pw@db:5432/todolist"

    def test_database_url_env_wins(self, clean_env):
        clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite:///./data/test.db")

        settings = Settings(_env_file=None, jwt_secret_key="s")

        assert settings.database_url == "sqlite+aiosqlite:///./data/test.db"


class TestApiSettings:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("/api", "/api"), ("api", "/api"), ("/api/", "/api"), ("", "")],
    )
    def test_prefix_is_normalized(self, clean_env, raw, expected):
        settings = Settings(_env_file=None, jwt_secret_key="s", api_prefix=raw)

        assert settings.api_prefix == expected

    def test_cors_lists_are_parsed(self, clean_env):
        settings = Settings(
            _env_file=None,
            jwt_secret_key="s",
            api_cors_origins="http://a.test, http://b.test",
            api_cors_methods="get,post",
        )

        assert settings.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.cors_methods == ["GET", "POST"]

    def test_empty_cors_origins(self, clean_env):
        settings = Settings(_env_file=None, jwt_secret_key="s")

        assert settings.cors_origins == []

    def test_ownership_flag_from_env(self, clean_env):
        clean_env.setenv("ENFORCE_TODO_OWNERSHIP", "false")

        settings = Settings(_env_file=None, jwt_secret_key="s")

        assert settings.enforce_todo_ownership is False


class TestGetSettings:
    def test_cached_until_cleared(self, clean_env):
        clean_env.setenv("JWT_SECRET_KEY", "first")
        first = get_settings()
        clean_env.setenv("JWT_SECRET_KEY", "second")

        assert get_settings() is first

        clear_settings_cache()
        assert get_settings().jwt_secret_key.get_secret_value() == "second"

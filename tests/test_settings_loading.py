"""
Test settings loading from the environment.

Verifies that each settings section picks up its prefixed variables
and that the aggregated settings are cached.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.settings import AppSettings, DatabaseSettings, LoggingSettings, get_app_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


def test_database_defaults(monkeypatch):
    monkeypatch.delenv("DB_URL", raising=False)

    settings = DatabaseSettings(_env_file=None)

    assert settings.url == "sqlite+aiosqlite:///./orders.db"
    assert settings.is_sqlite
    assert not settings.is_memory
    assert settings.sqlite_foreign_keys is True
    assert settings.echo_sql is False


def test_database_env_prefix(monkeypatch):
    monkeypatch.setenv("DB_URL", "postgresql+asyncpg://user:pw@localhost:5432/orders")
    monkeypatch.setenv("DB_POOL_SIZE", "5")
    monkeypatch.setenv("DB_ECHO_SQL", "true")

    settings = DatabaseSettings(_env_file=None)

    assert settings.url.startswith("postgresql+asyncpg://")
    assert settings.pool_size == 5
    assert settings.echo_sql is True
    assert not settings.is_sqlite


def test_invalid_pool_size(monkeypatch):
    monkeypatch.setenv("DB_POOL_SIZE", "0")

    with pytest.raises(ValidationError):
        DatabaseSettings(_env_file=None)


def test_logging_level_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert LoggingSettings(_env_file=None).level == "DEBUG"


def test_logging_level_rejects_unknown(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        LoggingSettings(_env_file=None)


def test_app_settings_cached(monkeypatch):
    monkeypatch.setenv("DB_URL", "sqlite+aiosqlite:///:memory:")

    settings = get_app_settings()

    assert isinstance(settings, AppSettings)
    assert settings is get_app_settings()
    assert settings.database.is_memory
    assert settings.logging.level == "INFO"

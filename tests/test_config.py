"""
Configuration Tests
===================

Tests for environment-driven Settings.
"""

import pytest
from pydantic import ValidationError

from agent_ledger.core.config import Settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_database_url_built_from_parts(monkeypatch):
    monkeypatch.delenv("POSTGRES_URL", raising=False)
    settings = _settings(
        APP_ENV="development",
        POSTGRES_HOST="db",
        POSTGRES_PORT=6543,
        POSTGRES_USER="ledger",
        POSTGRES_PASSWORD="secret",
        POSTGRES_DB="events",
    )

    assert settings.DATABASE_URL == "postgresql+asyncpg://ledger:secret@db:6543/events"


def test_explicit_postgres_url_wins_over_parts():
    settings = _settings(APP_ENV="production", POSTGRES_URL="postgresql+asyncpg://u:p@h:1/d")

    assert settings.DATABASE_URL == "postgresql+asyncpg://u:p@h:1/d"
    assert settings.is_production


def test_test_database_url_only_applies_in_test_env():
    kwargs = dict(
        POSTGRES_URL="postgresql+asyncpg://u:p@h:1/d",
        TEST_DATABASE_URL="sqlite+aiosqlite:///:memory:",
    )

    assert _settings(APP_ENV="test", **kwargs).DATABASE_URL == "sqlite+aiosqlite:///:memory:"
    assert _settings(APP_ENV="development", **kwargs).DATABASE_URL == "postgresql+asyncpg://u:p@h:1/d"


def test_log_level_is_normalized():
    assert _settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        _settings(LOG_LEVEL="chatty")

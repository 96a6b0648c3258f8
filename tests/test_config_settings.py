"""Tests for the Settings model."""
import pytest
from pydantic import ValidationError

from app.adapters.configuration.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("DATABASE_URL", "POSTGRES_HOST", "POSTGRES_USER", "POSTGRES_PASSWORD",
                 "POSTGRES_DB", "POSTGRES_PORT", "CORS_ORIGINS", "LOG_LEVEL", "API_PREFIX",
                 "AUTO_CREATE_SCHEMA", "SEED_ON_STARTUP"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_use_local_sqlite_database():
    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL == "sqlite+aiosqlite:///./usermanagement.db"
    assert settings.is_sqlite is True
    assert settings.API_PREFIX == "/api"
    assert settings.AUTO_CREATE_SCHEMA is True
    assert settings.SEED_ON_STARTUP is True


def test_postgres_url_is_assembled_from_parts(monkeypatch):
    monkeypatch.setenv("POSTGRES_HOST", "db")
    monkeypatch.setenv("POSTGRES_USER", "app")
    monkeypatch.setenv("POSTGRES_PASSWORD", "secret")
    monkeypatch.setenv("POSTGRES_DB", "users")

    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL == "postgresql+asyncpg://app:secret@db:5432/users"
    assert settings.is_sqlite is False


def test_explicit_database_url_wins(monkeypatch):
    monkeypatch.setenv("POSTGRES_HOST", "db")
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

    assert Settings(_env_file=None).DATABASE_URL == "sqlite+aiosqlite:///:memory:"


@pytest.mark.parametrize("raw, expected", [
    ("http://a.test, http://b.test", ["http://a.test", "http://b.test"]),
    ('["http://a.test"]', ["http://a.test"]),
])
def test_cors_origins_accepts_csv_and_json(monkeypatch, raw, expected):
    monkeypatch.setenv("CORS_ORIGINS", raw)

    assert Settings(_env_file=None).CORS_ORIGINS == expected


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)

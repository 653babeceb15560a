"""Tests for loading settings from the environment."""

import pytest

from taskmanager.config import Settings
from taskmanager.errors import ConfigurationError
from taskmanager.main import create_app

KEY = "0123456789abcdef0123456789abcdef"


def test_missing_signing_key_fails():
    with pytest.raises(ConfigurationError, match="JWT_SECRET_KEY"):
        Settings.from_env({})


def test_blank_signing_key_fails():
    with pytest.raises(ConfigurationError):
        Settings.from_env({"JWT_SECRET_KEY": "   "})


def test_short_signing_key_fails():
    with pytest.raises(ConfigurationError, match="at least 32"):
        Settings.from_env({"JWT_SECRET_KEY": "too-short"})


def test_defaults():
    settings = Settings.from_env({"JWT_SECRET_KEY": KEY})
    assert settings.jwt_secret_key == KEY
    assert settings.database_url == "sqlite:///./tasks.db"
    assert settings.token_ttl_days == 7
    assert settings.bcrypt_rounds == 12
    assert settings.log_level == "INFO"


def test_overrides_from_environment():
    settings = Settings.from_env(
        {
            "JWT_SECRET_KEY": KEY,
            "DATABASE_URL": "postgresql://db/tasks",
            "TOKEN_TTL_DAYS": "1",
            "BCRYPT_ROUNDS": "10",
            "CORS_ORIGINS": "https://a.example, https://b.example,",
            "LOG_LEVEL": "debug",
            "PORT": "9000",
        }
    )
    assert settings.database_url == "postgresql://db/tasks"
    assert settings.token_ttl_days == 1
    assert settings.bcrypt_rounds == 10
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.log_level == "DEBUG"
    assert settings.port == 9000


def test_invalid_number_fails():
    with pytest.raises(ConfigurationError):
        Settings.from_env({"JWT_SECRET_KEY": KEY, "BCRYPT_ROUNDS": "lots"})


def test_create_app_without_key_fails(monkeypatch):
    monkeypatch.delenv("JWT_SECRET_KEY", raising=False)
    with pytest.raises(ConfigurationError):
        create_app()

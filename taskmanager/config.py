# taskmanager/config.py
"""Process-wide settings, loaded once from the environment at startup."""

import os

from pydantic import BaseModel, Field, field_validator

from taskmanager.errors import ConfigurationError

MIN_SECRET_KEY_LENGTH = 32


class Settings(BaseModel):
    """Immutable application configuration passed into the app factory."""

    model_config = {"frozen": True}

    jwt_secret_key: str
    database_url: str = "sqlite:///./tasks.db"
    token_ttl_days: int = Field(default=7, ge=1)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        if len(v) < MIN_SECRET_KEY_LENGTH:
            raise ValueError(
                f"JWT secret key must be at least {MIN_SECRET_KEY_LENGTH} characters"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return v.upper()

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings from environment variables.

        Raises ConfigurationError when the signing key is absent or any
        value fails validation. There is no fallback signing key.
        """
        env = os.environ if environ is None else environ

        secret = env.get("JWT_SECRET_KEY", "").strip()
        if not secret:
            raise ConfigurationError("JWT_SECRET_KEY is not set")

        values = {"jwt_secret_key": secret}
        optional = {
            "DATABASE_URL": "database_url",
            "TOKEN_TTL_DAYS": "token_ttl_days",
            "BCRYPT_ROUNDS": "bcrypt_rounds",
            "LOG_LEVEL": "log_level",
            "HOST": "host",
            "PORT": "port",
        }
        for env_name, field_name in optional.items():
            raw = env.get(env_name)
            if raw:
                values[field_name] = raw.strip()

        origins = env.get("CORS_ORIGINS")
        if origins:
            values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

        try:
            return cls(**values)
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

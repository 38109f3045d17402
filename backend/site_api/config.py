"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - Required values are optional at boot; require() raises ConfigError at first use
    - ENV_FILE selects the dotenv file (default .env)

Design Decisions:
    - Settings passed explicitly into the database manager and identity client;
      route handlers never read os.environ
"""

import os
from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from site_api.core.errors import ConfigError


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Server (loopback only; a reverse proxy fronts the API)
    host: str = "127.0.0.1"
    port: int = 5050

    # Identity provider (Supabase auth)
    supabase_url: str | None = None
    supabase_service_role_key: str | None = None
    identity_timeout_seconds: float = 10.0

    # Managed data store (Supabase Postgres)
    database_url: str | None = Field(
        None, validation_alias=AliasChoices("database_url", "supabase_db_url"),
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Supabase hands out postgres(ql):// URLs; asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str):
            for prefix in ("postgresql://", "postgres://"):
                if v.startswith(prefix):
                    return "postgresql+asyncpg://" + v[len(prefix):]
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 5

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def require(self, name: str) -> str:
        """Return a required setting or raise ConfigError naming its env var."""
        value = getattr(self, name)
        if not value:
            raise ConfigError(name.upper())
        return value


def load_settings(env_file: str | None = None) -> Settings:
    """Build Settings from the environment plus the selected dotenv file."""
    return Settings(_env_file=env_file or os.environ.get("ENV_FILE", ".env"))


@lru_cache
def get_settings() -> Settings:
    return load_settings()

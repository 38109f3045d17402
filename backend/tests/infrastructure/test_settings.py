"""Settings: env loading, dotenv selection, URL normalisation, lazy requirements."""

import pytest

from site_api.config import Settings, load_settings
from site_api.core.errors import ConfigError
from site_api.infrastructure.database import init_db
from site_api.infrastructure.identity import build_identity_provider


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "DATABASE_URL", "SUPABASE_DB_URL", "SUPABASE_URL",
        "SUPABASE_SERVICE_ROLE_KEY", "PORT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_bind_loopback():
    settings = Settings(_env_file=None)
    assert settings.host == "127.0.0.1"
    assert settings.port == 5050
    assert settings.database_url is None


@pytest.mark.parametrize("raw", [
    "postgresql://u:p@db.supabase.test:5432/postgres",
    "postgres://u:p@db.supabase.test:5432/postgres",
])
def test_database_url_rewritten_for_asyncpg(monkeypatch, raw):
    monkeypatch.setenv("DATABASE_URL", raw)
    settings = Settings(_env_file=None)
    assert settings.database_url == (
        "postgresql+asyncpg://u:p@db.supabase.test:5432/postgres"
    )


def test_supabase_db_url_alias(monkeypatch):
    monkeypatch.setenv("SUPABASE_DB_URL", "postgresql://u:p@h/db")
    assert Settings(_env_file=None).database_url == "postgresql+asyncpg://u:p@h/db"


def test_env_file_selects_dotenv(tmp_path, monkeypatch):
    env_file = tmp_path / "site.env"
    env_file.write_text("PORT=6060\nSUPABASE_URL=https://from-file.supabase.test\n")
    monkeypatch.setenv("ENV_FILE", str(env_file))
    settings = load_settings()
    assert settings.port == 6060
    assert settings.supabase_url == "https://from-file.supabase.test"


def test_require_names_missing_variable():
    settings = Settings(_env_file=None)
    with pytest.raises(ConfigError) as exc_info:
        settings.require("supabase_service_role_key")
    assert exc_info.value.message == "Missing SUPABASE_SERVICE_ROLE_KEY"


def test_missing_database_url_fails_at_first_use():
    with pytest.raises(ConfigError) as exc_info:
        init_db(Settings(_env_file=None))
    assert exc_info.value.variable == "DATABASE_URL"


def test_identity_provider_needs_supabase_settings(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.test")
    with pytest.raises(ConfigError) as exc_info:
        build_identity_provider(Settings(_env_file=None))
    assert exc_info.value.variable == "SUPABASE_SERVICE_ROLE_KEY"

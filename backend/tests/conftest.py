"""Root conftest: shared test configuration."""

import os

# Tests never reach the real Supabase project
os.environ.setdefault("SUPABASE_URL", "https://example.supabase.test")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "service-role-test-key")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("ENV_FILE", "/nonexistent/.env")

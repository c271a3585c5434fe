"""
Test suite for environment-driven settings.

System role: Verification of configuration defaults and env prefixes
"""

from tunesmith.configs.database import DatabaseSettings
from tunesmith.configs.provider import ProviderSettings
from tunesmith.configs.storage import StorageSettings
from tunesmith.configs.workers import WorkerSettings


class TestSettingsDefaults:
    """Test suite for default values."""

    def test_provider_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("KIE_API_KEY", raising=False)
        monkeypatch.delenv("KIE_BASE_URL", raising=False)

        settings = ProviderSettings(_env_file=None)

        assert settings.api_key is None
        assert settings.base_url == "https://api.kie.ai/api/v1"

    def test_storage_and_worker_defaults(self, monkeypatch) -> None:
        for name in ("CONTENT_TRACK_RETENTION_DAYS", "WORKER_POLL_INTERVAL_SECONDS"):
            monkeypatch.delenv(name, raising=False)

        assert StorageSettings(_env_file=None).track_retention_days == 15
        assert WorkerSettings(_env_file=None).poll_interval_seconds == 8.0


class TestSettingsEnvironment:
    """Test suite for env var overrides."""

    def test_prefixed_env_vars_are_read(self, monkeypatch) -> None:
        monkeypatch.setenv("KIE_API_KEY", "from-env")
        monkeypatch.setenv("CONTENT_DIRECTORY", "/tmp/content")

        assert ProviderSettings(_env_file=None).api_key == "from-env"
        assert StorageSettings(_env_file=None).directory == "/tmp/content"

    def test_database_url_override_selects_sqlite(self, monkeypatch) -> None:
        monkeypatch.setenv("POSTGRES_URL", "sqlite+aiosqlite:///./tunesmith.db")

        settings = DatabaseSettings(_env_file=None)

        assert settings.async_database_url == "sqlite+aiosqlite:///./tunesmith.db"
        assert settings.is_sqlite

    def test_database_url_assembled_for_postgres(self, monkeypatch) -> None:
        monkeypatch.delenv("POSTGRES_URL", raising=False)
        monkeypatch.setenv("POSTGRES_HOST", "db.internal")

        settings = DatabaseSettings(_env_file=None)

        assert settings.async_database_url.startswith("postgresql+asyncpg://")
        assert "@db.internal:5432/" in settings.async_database_url
        assert not settings.is_sqlite

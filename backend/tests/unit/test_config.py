"""Tests for configuration module."""

import pytest

from patient_service.core.config import DatabaseSettings, Settings, get_settings


class TestSettings:
    """Test Settings configuration."""

    def test_default_settings(self):
        """Test default settings values."""
        settings = Settings()
        assert settings.app_name == "Patient Service"
        assert settings.app_version == "1.0.0"
        assert settings.environment == "development"
        assert settings.json_logs is False

    def test_production_defaults_to_json_logs(self):
        """Test JSON logging is enabled in production."""
        settings = Settings(environment="production")
        assert settings.json_logs is True

    def test_production_rejects_debug(self):
        """Test debug mode is refused in production."""
        with pytest.raises(ValueError, match="Debug mode"):
            Settings(environment="production", debug=True)

    def test_production_rejects_demo_data(self):
        """Test demo data is refused in production."""
        with pytest.raises(ValueError, match="Demo data"):
            Settings(environment="production", enable_demo_data=True)

    def test_get_settings_cached(self):
        """Test settings are cached."""
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2


class TestDatabaseSettings:
    """Test database URL composition."""

    def test_url_from_fields(self, monkeypatch):
        monkeypatch.delenv("DB_URL", raising=False)
        db = DatabaseSettings(
            driver="postgresql+asyncpg",
            host="db",
            port=5433,
            user="svc",
            password="pw",
            name="registry",
            url=None,
        )
        assert db.connection_url == "postgresql+asyncpg://svc:pw@db:5433/registry"
        assert db.is_sqlite is False

    def test_url_overrides_fields(self):
        db = DatabaseSettings(url="sqlite+aiosqlite:///./patients.db")
        assert db.connection_url == "sqlite+aiosqlite:///./patients.db"
        assert db.is_sqlite is True

    def test_db_url_environment_variable(self, monkeypatch):
        """Test DB_URL replaces the composed connection URL."""
        monkeypatch.setenv("DB_URL", "sqlite+aiosqlite:///./from_env.db")
        settings = Settings()
        assert settings.database.connection_url == "sqlite+aiosqlite:///./from_env.db"
        assert settings.database.is_sqlite is True

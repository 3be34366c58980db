"""Application configuration management using Pydantic Settings.

This module provides centralized configuration for the Patient Service backend,
supporting environment variables and .env files for different deployment environments.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the backend directory (parent of patient_service/ directory)
BACKEND_DIR = Path(__file__).parent.parent.parent
ENV_FILE = BACKEND_DIR / ".env"

# Load environment variables from .env file
load_dotenv(ENV_FILE)


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    driver: str = Field(default="postgresql+asyncpg", description="Database driver")
    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    user: str = Field(default="patients", description="Database user")
    password: str = Field(default="", description="Database password")
    name: str = Field(default="patient_service", description="Database name")
    url: str | None = Field(
        default=None,
        description="Full connection URL; overrides the individual fields (e.g. sqlite+aiosqlite:///./patients.db)",
    )
    pool_size: int = Field(default=10, ge=1, le=100, description="Connection pool size")
    max_overflow: int = Field(default=20, ge=0, le=100, description="Max pool overflow")
    echo: bool = Field(default=False, description="Log emitted SQL")
    create_tables_on_startup: bool = Field(
        default=False, description="Create missing tables at startup instead of relying on Alembic"
    )

    @property
    def connection_url(self) -> str:
        """Get database connection URL."""
        if self.url:
            return self.url
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"

    @property
    def is_sqlite(self) -> bool:
        return self.connection_url.startswith("sqlite")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = Field(default="Patient Service", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Deployment environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")
    workers: int = Field(default=4, ge=1, le=32, description="Number of workers")

    # Logging settings
    log_level: str = Field(default="INFO", description="Minimum log level")
    json_logs: bool | None = Field(
        default=None, description="Emit JSON logs; defaults to True in production"
    )
    log_file: str | None = Field(default=None, description="Optional log file path")

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(default=True, description="Allow CORS credentials")

    # Demo data
    enable_demo_data: bool = Field(
        default=False, description="Seed demo patients at startup (development only)"
    )

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate settings after initialization."""
        if self.environment == "production":
            if self.debug:
                raise ValueError("Debug mode must be disabled in production (DEBUG=false)")
            if self.enable_demo_data:
                raise ValueError("Demo data must be disabled in production (ENABLE_DEMO_DATA=false)")

        if self.json_logs is None:
            object.__setattr__(self, "json_logs", self.environment == "production")

        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()

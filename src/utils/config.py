"""
Configuration management for the Labour Chowk matching engine.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal
from urllib.parse import quote_plus

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent


class DatabaseSettings(BaseSettings):
    """MongoDB database configuration."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    host: str = "localhost"
    port: int = 27017
    name: str = "labour_chowk"
    username: str | None = None
    password: str | None = None

    # Collections owned by the marketplace application
    profiles_collection: str = "profiles"
    jobs_collection: str = "jobs"

    # Connection pool
    server_selection_timeout_ms: int = 5000
    max_pool_size: int = 50
    min_pool_size: int = 5

    @property
    def uri(self) -> str:
        """MongoDB URI with URL-encoded credentials."""
        host = self.host.strip()
        if not host or any(c in host for c in ";&|$`/"):
            raise ValueError(f"Invalid database host: {self.host}")

        auth = ""
        if self.username and self.password:
            auth = f"{quote_plus(self.username)}:{quote_plus(self.password)}@"

        return f"mongodb://{auth}{host}:{self.port}"


class MatchingSettings(BaseSettings):
    """Matching engine configuration."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    default_limit: int = 10

    @field_validator("default_limit")
    @classmethod
    def validate_default_limit(cls, v: int) -> int:
        """Limit must be a positive number of results."""
        if v < 1:
            raise ValueError("default_limit must be at least 1")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "labour_chowk.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "Labour Chowk"
    version: str = "0.1.0"
    description: str = "Worker-job matching and rate suggestion engine"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings


# Convenience exports
settings = get_settings()

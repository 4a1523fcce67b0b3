"""Application settings and configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from expense_tracker.domain.models.enums import ListenerErrorPolicy


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Expense Tracker"
    app_version: str = "0.1.0"

    log_level: str = "INFO"

    # pytz zone name used to stamp and interpret transaction times
    timezone: str = "US/Eastern"

    # What the model does when a listener raises during notification
    listener_error_policy: ListenerErrorPolicy = ListenerErrorPolicy.PROPAGATE


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None

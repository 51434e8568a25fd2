"""
Configuration management using pydantic-settings.

Loads settings from environment variables and .env file.
Provides type-safe access with validation.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ─────────────────────────────────────────────────────────────
# NESTED SETTINGS
# ─────────────────────────────────────────────────────────────


class ShellSettings(BaseSettings):
    """Interactive shell configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SHELL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prompt: str = "robot> "
    show_board: bool = Field(
        default=True,
        description="Draw the table after every command",
    )
    log_limit: int = Field(
        default=100,
        ge=1,
        description="Maximum number of command log entries kept by a session",
    )


class LoggingSettings(BaseSettings):
    """Python logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ─────────────────────────────────────────────────────────────
# MAIN SETTINGS
# ─────────────────────────────────────────────────────────────


class Settings(BaseSettings):
    """
    Main application settings.

    Loads from .env file and environment variables.
    Environment variables take precedence over .env file.
    Each section reads its own prefixed keys (SHELL_*, LOG_*); the root
    prefix keeps ambient variables such as $SHELL out of the sections.
    """

    model_config = SettingsConfigDict(
        env_prefix="TOYROBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    shell: ShellSettings = Field(default_factory=ShellSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# ─────────────────────────────────────────────────────────────
# SINGLETON ACCESS
# ─────────────────────────────────────────────────────────────

_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (for testing)."""
    global _settings
    _settings = None

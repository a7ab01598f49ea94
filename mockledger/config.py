"""Configuration loading for mockledger.

This module provides centralized configuration management:
- Load settings from MOCKLEDGER_* environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_prefix="MOCKLEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Reporting configuration
    report_backend: Literal["recording", "logging", "asserting"] = Field(
        default="asserting",
        description="Where verify() sends results when no reporter is passed",
    )
    max_arg_repr_length: int = Field(
        default=80,
        description="Truncate argument reprs longer than this in descriptions",
    )

    # Logging configuration
    configure_logging: bool = Field(
        default=False,
        description="Install a stdout logging handler on first use",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("max_arg_repr_length")
    @classmethod
    def validate_max_arg_repr_length(cls, v: int) -> int:
        """Ensure the truncation width leaves room for the ellipsis."""
        if v < 4:
            raise ValueError("max_arg_repr_length must be at least 4")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load library settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]

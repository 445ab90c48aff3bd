"""Configuration module using pydantic-settings for dtokit."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from ``DTOKIT_``-prefixed environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DTOKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Export defaults
    export_snake_case_keys: bool = True

    # Logging
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject names the logging module does not know.

        Raises:
            ValueError: If the level is not a standard logging level name.

        Returns:
            Upper-cased level name.
        """
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v!r}")
        return level


# Singleton instance
settings = Settings()

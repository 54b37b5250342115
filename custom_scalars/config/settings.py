"""Library settings and configuration."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "custom_scalars"


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Prepended to validation messages by the graphql adapter,
    # e.g. "Query error: "
    error_prefix: str = ""

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="CUSTOM_SCALARS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = str(v).upper()
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}, got {level}")
        return level


def configure_logging(config: Settings | None = None) -> logging.Logger:
    """Apply the configured log level to the package logger.

    Handlers are left to the embedding application.

    Args:
        config: Settings to apply (defaults to the module-level settings)

    Returns:
        The package logger

    """
    config = config or settings
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(config.log_level)
    logger.debug(f"Package log level set to {config.log_level}")
    return package_logger


settings = Settings()

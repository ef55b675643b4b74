"""Configuration management using Pydantic Settings.

This module provides type-safe configuration with automatic environment
variable loading and validation.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels and optional log file
- SequencingConfig: How deferreds and async chains treat contract violations
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "WARNING"
    file_level: str = "DEBUG"
    log_file: Path | None = None


class SequencingConfig(BaseModel):
    """Policy for repeated settlement and repeated chain advances."""

    # Raise DeferredStateError on a second resolve/reject instead of ignoring it
    strict_settlement: bool = False
    # Raise ChainStateError on a repeated or stale advance instead of ignoring it
    strict_advance: bool = False


class Settings(BaseSettings):
    """Main settings with environment variable support.

    Environment variables use nested naming with the FNKIT_ prefix:
    FNKIT_LOGGING__CONSOLE_LEVEL, FNKIT_SEQUENCING__STRICT_ADVANCE

    Flat keys (console_log_level, strict_settlement, ...) are accepted as
    constructor arguments and mapped onto the nested groups. The .env file
    is loaded when present.
    """

    model_config = SettingsConfigDict(
        env_prefix="FNKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    sequencing: SequencingConfig = SequencingConfig()

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Map flat environment variables onto the nested structure."""
        if not isinstance(data, dict):
            return data

        transformed: dict[str, dict[str, Any]] = {}

        log_mapping = {
            "console_log_level": "console_level",
            "file_log_level": "file_level",
            "log_file": "log_file",
        }
        for env_key, field_key in log_mapping.items():
            if env_key in data:
                transformed.setdefault("logging", {})[field_key] = data.pop(env_key)

        for env_key in ("strict_settlement", "strict_advance"):
            if env_key in data:
                transformed.setdefault("sequencing", {})[env_key] = data.pop(env_key)

        for section, values in transformed.items():
            existing = data.get(section)
            if isinstance(existing, dict):
                values = {**existing, **values}
            data[section] = values

        return data


# Singleton instance for application use
settings = Settings()


# =============================================================================
# FLAT KEY ACCESS
# =============================================================================

_LEGACY_KEY_MAP = {
    "CONSOLE_LOG_LEVEL": lambda: settings.logging.console_level,
    "FILE_LOG_LEVEL": lambda: settings.logging.file_level,
    "LOG_FILE": lambda: settings.logging.log_file,
    "STRICT_SETTLEMENT": lambda: settings.sequencing.strict_settlement,
    "STRICT_ADVANCE": lambda: settings.sequencing.strict_advance,
}


def get_config(key: str, default=None):
    """Get configuration value by flat key with optional default.

    Args:
        key: Configuration key to retrieve
        default: Default value if key not found

    Returns:
        Configuration value or default

    Example:
        >>> get_config("STRICT_SETTLEMENT")
        False
    """
    if key in _LEGACY_KEY_MAP:
        return _LEGACY_KEY_MAP[key]()

    return default

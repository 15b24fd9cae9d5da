"""
Configuration settings for geocoord.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from geocoord.core.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Attributes:
        default_mgrs_precision: MGRS precision used when the caller passes none
        log_level: Log level name used by setup_logging
        log_json: Whether file logs are written as JSON
        log_file: Optional log file path
        environment: Deployment environment
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="GEOCOORD_",
        extra="ignore",
    )

    # Serializer settings
    default_mgrs_precision: int = 5

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Optional[Path] = None

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @field_validator("default_mgrs_precision")
    @classmethod
    def check_precision(cls, value: int) -> int:
        """Precision must name one of the five MGRS grid resolutions."""
        if not 1 <= value <= 5:
            raise ValueError(f"default_mgrs_precision must be between 1 and 5, got {value}")
        return value

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


def load_settings(**overrides: object) -> Settings:
    """
    Build settings from the environment, reporting problems as ConfigurationError.

    Args:
        **overrides: Explicit values that take precedence over the environment

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If any setting fails validation
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        config_key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid configuration: {first.get('msg')}",
            config_key=config_key or None,
            details={"errors": len(e.errors())},
        ) from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return load_settings()

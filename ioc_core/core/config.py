"""
Configuration for the dependency container.

Values are read from environment variables prefixed with ``IOC_``.
"""
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Container settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="IOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Resolution
    use_mocks: bool = False
    detect_cycles: bool = False
    strict_types: bool = False

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "pretty"] = "pretty"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""Environment-based configuration using pydantic-settings.

Example:
    >>> from iterkit.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.bench.count
    1000000

    # Or with environment variables:
    # ITERKIT_LOG_LEVEL=DEBUG
    # ITERKIT_LOG_FORMAT=json
    # ITERKIT_BENCH_COUNT=50000
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ITERKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="Force console colors on/off; None auto-detects a TTY")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class BenchSettings(BaseSettings):
    """Benchmark defaults for `iterkit-bench`."""

    model_config = SettingsConfigDict(
        env_prefix="ITERKIT_BENCH_",
        extra="ignore",
    )

    count: PositiveInt = Field(default=1_000_000, description="Elements per benchmark case")
    runs: PositiveInt = Field(default=1, description="Repetitions per case; the best run is reported")
    seed: int | None = Field(default=None, description="Random seed for reproducible inputs")


class IterkitSettings(BaseSettings):
    """Root settings, loaded from ITERKIT_* variables and an optional .env file.

    Example environment variables:
        ITERKIT_DEBUG=true
        ITERKIT_LOG_LEVEL=DEBUG
        ITERKIT_BENCH_RUNS=5
    """

    model_config = SettingsConfigDict(
        env_prefix="ITERKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    bench: BenchSettings = Field(default_factory=BenchSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> IterkitSettings:
    """Global settings instance (cached)."""
    return IterkitSettings()


def clear_settings_cache() -> None:
    """Force the next get_settings() call to re-read the environment."""
    get_settings.cache_clear()

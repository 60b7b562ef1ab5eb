"""Configuration management using pydantic-settings."""

from .settings import (
    BenchSettings,
    IterkitSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "BenchSettings",
    "IterkitSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]

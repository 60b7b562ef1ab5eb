"""Tests for pydantic-settings configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from iterkit.config import BenchSettings, IterkitSettings, LoggingSettings, get_settings


def test_defaults() -> None:
    settings = IterkitSettings()
    assert settings.debug is False
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "console"
    assert settings.bench.count == 1_000_000
    assert settings.bench.runs == 1
    assert settings.bench.seed is None


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ITERKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("ITERKIT_LOG_FORMAT", "json")
    monkeypatch.setenv("ITERKIT_BENCH_COUNT", "5000")
    monkeypatch.setenv("ITERKIT_BENCH_SEED", "42")

    settings = get_settings()
    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"
    assert settings.bench.count == 5000
    assert settings.bench.seed == 42


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_debug_forces_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ITERKIT_DEBUG", "true")
    assert get_settings().effective_log_level == "DEBUG"


def test_invalid_values_rejected() -> None:
    with pytest.raises(ValidationError):
        BenchSettings(count=0)
    with pytest.raises(ValidationError):
        LoggingSettings(format="xml")

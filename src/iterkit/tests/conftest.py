"""Shared fixtures: silent logging and a fresh settings cache per test."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from iterkit.config import clear_settings_cache
from iterkit.observability import configure_logging


@pytest.fixture(autouse=True)
def silent_logging() -> Iterator[None]:
    """Discard log output unless a test configures its own renderer."""
    configure_logging("none")
    yield
    configure_logging("none")


@pytest.fixture(autouse=True)
def clean_settings() -> Iterator[None]:
    """Reset the cached settings before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


class Tracked:
    """Iterator over a list that records every element pulled from it."""

    def __init__(self, items: list[object]) -> None:
        self._items = iter(items)
        self.pulled: list[object] = []

    def __iter__(self) -> Tracked:
        return self

    def __next__(self) -> object:
        value = next(self._items)
        self.pulled.append(value)
        return value


@pytest.fixture
def tracked() -> type[Tracked]:
    return Tracked

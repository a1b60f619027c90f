"""Shared fixtures — keep the process-global defaults isolated per test."""

from collections.abc import Iterator

import pytest

from warble.config import DefaultsStore, reset_defaults


@pytest.fixture(autouse=True)
def _restore_global_defaults() -> Iterator[None]:
    reset_defaults()
    yield
    reset_defaults()


@pytest.fixture
def store() -> DefaultsStore:
    return DefaultsStore()

"""Shared fixtures for secconfig tests."""

import pytest

from secconfig.config import ConfigStore, reset_config_store


BUILTIN_VALUES = {
    "detection.enabled": True,
    "detection.confidenceThreshold": 0.7,
    "containment.autoContain": True,
    "containment.threshold": 3,
    "logging.enabled": True,
    "logging.level": "info",
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep SECCONFIG_* variables and the shared store out of every test."""
    monkeypatch.delenv("SECCONFIG_DEBUG", raising=False)
    monkeypatch.delenv("SECCONFIG_OVERRIDES_FILE", raising=False)
    reset_config_store()
    yield
    reset_config_store()


@pytest.fixture
def store():
    """Create a freshly seeded ConfigStore."""
    return ConfigStore()


@pytest.fixture
def builtin_values():
    """Key -> value view of the built-in entries."""
    return dict(BUILTIN_VALUES)

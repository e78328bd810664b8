"""Shared test fixtures."""

import pytest

from e2e_framework.data.random_provider import reset_seed


@pytest.fixture(autouse=True)
def isolate_default_provider():
    """Reseed the process-wide provider after every test."""
    yield
    reset_seed()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove run configuration variables so tests see defaults."""
    for name in (
        "ENV",
        "BASE_URL",
        "TEST_USERNAME",
        "TEST_PASSWORD",
        "CI",
        "LOG_LEVEL",
        "HEADLESS",
        "AUTH_STATE_PATH",
        "TEST_SEED",
    ):
        monkeypatch.delenv(name, raising=False)

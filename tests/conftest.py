"""Shared test fixtures."""

import pytest

from pattern_demos.core.config import get_settings
from pattern_demos.core.singleton import reset_singletons


@pytest.fixture(autouse=True)
def demo_env(monkeypatch):
    """Pin settings so a developer's .env or shell can't leak into tests."""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SERVICE_NAME", "pattern-demos-test")
    monkeypatch.setenv("DEFAULT_CURRENCY", "USD")
    monkeypatch.setenv("DEMO_PAYMENT_AMOUNT", "1000")
    monkeypatch.setenv("DEMO_EVENT_PAYLOAD", "Hello, World!")
    monkeypatch.setenv("BROKER_ISOLATE_FAILURES", "true")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def fresh_singletons():
    reset_singletons()
    yield
    reset_singletons()


@pytest.fixture
def recorder():
    """A handler that remembers every payload it was called with."""

    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, payload):
            self.calls.append(payload)

    return Recorder()

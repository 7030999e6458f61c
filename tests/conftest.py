"""Pytest configuration and shared fixtures for twilio-client-core tests."""

import pytest

from twilio_client_core.testing import RecordingHandler, mock_client


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear credential environment variables before each test.

    This prevents a developer's real credentials from leaking into tests.
    """
    import os

    test_prefixes = ("TWILIO_", "TEST_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def handler():
    """Recording MockTransport handler with an empty response queue."""
    return RecordingHandler()


@pytest.fixture
def client(handler):
    """Client whose requests are served by ``handler``."""
    with mock_client(handler) as client:
        yield client

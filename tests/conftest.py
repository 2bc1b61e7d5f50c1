"""Pytest configuration and shared fixtures for klaw-option tests."""

import pytest

from klaw_option import _config
from klaw_option._logging import clear_log_hooks


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_option import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from klaw_option import Nothing

    return Nothing


@pytest.fixture
def calls():
    """Records the names of producers/callbacks that were invoked."""
    return []


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Run every test without inherited KLAW_OPTION_* settings or log hooks."""
    for name in ('KLAW_OPTION_LOG_LEVEL', 'KLAW_OPTION_JSON_LOGS', 'KLAW_OPTION_TRACE_UNWRAPS'):
        monkeypatch.delenv(name, raising=False)
    _config.reset()
    clear_log_hooks()
    yield
    _config.reset()
    clear_log_hooks()

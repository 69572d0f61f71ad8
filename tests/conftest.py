"""Shared test fixtures for the dbug test suite."""

import io
import os
from unittest.mock import patch

import pytest

from dbug.config import ENV_VAR


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: timing tests that sleep against the real clock",
    )


# ---------------------------------------------------------------------------
# Output sink
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer standing in for the terminal."""
    return io.StringIO()


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------
class FakeClock:
    """Manually advanced nanosecond clock."""

    def __init__(self, start=1_000_000_000):
        self.now = start

    def __call__(self):
        return self.now

    def advance_ms(self, ms):
        self.now += int(ms * 1_000_000)


@pytest.fixture
def clock():
    """A FakeClock to inject into ElapsedTimer / Logger."""
    return FakeClock()


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------
@pytest.fixture
def no_debug_env():
    """Run with DEBUG removed from the environment."""
    env = {k: v for k, v in os.environ.items() if k != ENV_VAR}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def debug_env():
    """Return a context manager factory that sets DEBUG for a block."""
    def _set(value):
        return patch.dict(os.environ, {ENV_VAR: value})
    return _set

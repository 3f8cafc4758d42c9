"""
Pytest configuration and shared fixtures for API handler tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep API_HANDLER_* env vars and the cached default config out of tests."""
    from api_handler.config import set_default_config

    for name in ("API_HANDLER_HTTP_TIMEOUT", "API_HANDLER_HTTP_PROXY", "API_HANDLER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def token_store():
    """A fresh TokenStore per test."""
    from api_handler.http import TokenStore
    return TokenStore()


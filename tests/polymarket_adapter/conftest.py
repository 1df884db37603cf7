"""
Shared fixtures for Polymarket adapter tests.
"""

import pytest

from polymarket_adapter.config import (
    ENV_MARKETS_FILE,
    ENV_MARKETS_JSON,
    ENV_DRY_RUN,
    ENV_BALANCE_USDC,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without adapter configuration."""
    for key in (ENV_MARKETS_FILE, ENV_MARKETS_JSON, ENV_DRY_RUN, ENV_BALANCE_USDC):
        # setenv first so monkeypatch also undoes values loaded from .env files
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch

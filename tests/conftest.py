"""Pytest configuration and fixtures.

Provides environment isolation and settings-cache hygiene. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import os

import pytest

from resultflow.config import reset_config_cache

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_resultflow_env(request, monkeypatch):
    """Ensure a clean RESULTFLOW_* environment for each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("RESULTFLOW_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the cached process-default settings around every test."""
    reset_config_cache()
    yield
    reset_config_cache()


"""Pytest configuration and fixtures.

Provides environment isolation, config reset, and logging configuration.
All fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from fntry.config import set_config

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
def isolate_fntry_env(request, monkeypatch):
    """Clear FNTRY_* env vars so each test sees the defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("FNTRY_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_config():
    """Drop any globally installed Config before and after each test."""
    set_config(None)
    yield
    set_config(None)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def fntry_debug_logs(caplog):
    """Capture DEBUG records from the fntry logger (not autouse)."""
    caplog.set_level(logging.DEBUG, logger="fntry")
    return caplog

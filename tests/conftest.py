"""Pytest configuration and fixtures.

Provides environment isolation and settings-cache resets. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import suppress
import os

import pytest

from variantkit import config
from variantkit.outcome import Failure, Outcome, Success

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
def isolate_settings_env(request, monkeypatch):
    """Clear VARIANTKIT_* env vars and the cached settings around each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith("VARIANTKIT_"):
                monkeypatch.delenv(key, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()


# =============================================================================
# Shared helpers
# =============================================================================


def parse_number(text: str) -> Outcome[float, str]:
    """Parse ``text`` as a float, failing with a descriptive message."""
    try:
        return Success(float(text))
    except ValueError:
        return Failure(f"Expected {text} to be a number")


@pytest.fixture
def parse() -> Callable[[str], Outcome[float, str]]:
    """Return the shared number parser."""
    return parse_number

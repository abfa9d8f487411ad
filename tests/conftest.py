"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration, and shared test
doubles. Fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import logging
import os

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class RecordingAction:
    """Callable that records every argument it is invoked with.

    Use to verify that side-effect hooks (``otherwise``, handlers passed to
    ``match``) ran exactly as often as expected.
    """

    calls: list[object] = field(default_factory=list)

    def __call__(self, arg: object) -> None:
        self.calls.append(arg)

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder() -> RecordingAction:
    """Return a fresh RecordingAction (not autouse)."""
    return RecordingAction()


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
def isolate_commonext_env(request, monkeypatch):
    """Clear COMMONEXT_* env vars so each test starts from defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("COMMONEXT_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("asyncio").setLevel(logging.WARNING)

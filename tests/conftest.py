"""Pytest configuration and fixtures.

Provides environment isolation, logging helpers and small handler doubles.
Environment fixtures are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import logging
import os
from typing import Any

import pytest

from routeresult.result import Err, Ok

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class FakeRepository:
    """Repository double returning ``Ok``/``Err`` results.

    ``rows`` maps ids to payloads; setting ``failure`` makes every call
    return ``Err(failure)`` instead.
    """

    rows: dict[int, dict[str, Any]] = field(default_factory=dict)
    failure: Any = None
    calls: int = 0

    def fetch(self, item_id: int) -> Ok[dict[str, Any] | None] | Err[Any]:
        self.calls += 1
        if self.failure is not None:
            return Err(self.failure)
        return Ok(self.rows.get(item_id))

    async def fetch_async(
        self, item_id: int
    ) -> Ok[dict[str, Any] | None] | Err[Any]:
        return self.fetch(item_id)


@pytest.fixture
def repository() -> FakeRepository:
    return FakeRepository(rows={7: {"id": 7, "name": "lamp"}})


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
            "routeresult.config.load_dotenv",
            lambda *_args, **_kwargs: False,
            raising=False,
        )


@pytest.fixture(autouse=True)
def isolate_routeresult_env(request, monkeypatch):
    """Clear ROUTERESULT_* env vars so Config.from_env() sees a clean slate.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("ROUTERESULT_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("hpack").setLevel(logging.WARNING)


@pytest.fixture
def error_records(caplog):
    """Return a callable listing ERROR records emitted by routeresult loggers."""
    caplog.set_level(logging.ERROR, logger="routeresult")

    def _records() -> list[logging.LogRecord]:
        return [
            r
            for r in caplog.records
            if r.levelno >= logging.ERROR and r.name.startswith("routeresult")
        ]

    return _records

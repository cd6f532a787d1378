"""Pytest configuration and shared fixtures for statuscli tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Generator
from unittest.mock import patch

import httpx
import msgspec
import pytest

import statuscli.config.settings as settings_module
from statuscli.core.request import ResilientRequester
from statuscli.models import Service, ServiceGroup


class RecordingHandler:
    """MockTransport handler that replays scripted results.

    Each item is a status code, a ``(status, body)`` tuple or an exception
    to raise. The last item repeats once the script runs out.
    """

    def __init__(self, *items, body: bytes = b"{}") -> None:
        self.items = list(items)
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.items[min(len(self.requests), len(self.items)) - 1]
        if isinstance(item, BaseException):
            raise item
        if isinstance(item, int):
            return httpx.Response(item, content=self.body)
        status, body = item
        return httpx.Response(status, content=body)

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def github_status_payload() -> dict:
    """Status document as served by githubstatus.com."""
    return {
        "page": {
            "id": "x1",
            "name": "GitHub",
            "url": "https://githubstatus.com",
            "time_zone": "Etc/UTC",
            "updated_at": "2024-01-01T00:00:00Z",
        },
        "status": {
            "indicator": "none",
            "description": "All Systems Operational",
        },
    }


@pytest.fixture
def github_status_body(github_status_payload: dict) -> bytes:
    return msgspec.json.encode(github_status_payload)


@pytest.fixture
def degraded_status_body(github_status_payload: dict) -> bytes:
    payload = dict(github_status_payload)
    payload["status"] = {"indicator": "minor", "description": "Minor Service Outage"}
    return msgspec.json.encode(payload)


@pytest.fixture
def sleeps() -> list[float]:
    """Backoff delays requested by the requester under test."""
    return []


@pytest.fixture
def fake_sleep(sleeps: list[float]) -> Callable:
    async def _sleep(delay: float) -> None:
        sleeps.append(delay)

    return _sleep


@pytest.fixture
def make_requester(fake_sleep: Callable) -> Callable[..., ResilientRequester]:
    """Factory for requesters backed by an httpx.MockTransport."""

    def _make(handler, **kwargs) -> ResilientRequester:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        kwargs.setdefault("sleep", fake_sleep)
        return ResilientRequester(client, owns_client=True, **kwargs)

    return _make


@pytest.fixture
def sample_service() -> Service:
    return Service(
        name="github",
        url="https://www.githubstatus.com/api/v2/status.json",
        group=ServiceGroup.SAAS,
    )


@pytest.fixture
def temp_config_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    with patch("statuscli.config.paths.config_dir", return_value=config_dir):
        yield config_dir


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Keep tests away from the user's config and environment."""
    for var in (
        "STATUSCLI_TIMEOUT",
        "STATUSCLI_MAX_RETRIES",
        "STATUSCLI_DEBUG",
        "STATUSCLI_NO_COLOR",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("STATUSCLI_CONFIG_DIR", str(tmp_path / "user-config"))
    settings_module._config = None

    yield

    settings_module._config = None
    logger = logging.getLogger("statuscli")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

"""Test configuration: `src/` importable plus shared fakes."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import httpx  # noqa: E402

from core.domain.models import ClientConfig  # noqa: E402


class RecordingHandler:
    """`httpx.MockTransport` handler that records every request it sees."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self._respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        base_url="https://api.test/",
        timeout_seconds=2.0,
        retries=2,
        retry_delay_seconds=0.001,
    )


@pytest.fixture
def recorder() -> Callable[[Callable[[httpx.Request], httpx.Response]], RecordingHandler]:
    return RecordingHandler

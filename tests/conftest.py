"""Pytest configuration for the binance_rest test suite."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Optional

import httpx
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from binance_rest import builder as builder_module  # noqa: E402

FIXED_TIMESTAMP = 1499827319559


class FakeExchange:
    """Records every request and answers with the queued responses in order.

    Without a queued response the exchange answers ``200 {}``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._replies: list[Callable[[httpx.Request], httpx.Response]] = []

    def reply(self, status_code: int = 200, *, json: Any = None, text: Optional[str] = None) -> None:
        def _respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json={} if json is None else json)

        self._replies.append(_respond)

    def fail(self, exc_type: type[httpx.TransportError] = httpx.ConnectError) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc_type("connection refused", request=request)

        self._replies.append(_raise)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._replies:
            return self._replies.pop(0)(request)
        return httpx.Response(200, json={})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def exchange() -> FakeExchange:
    return FakeExchange()


@pytest.fixture
def http(exchange: FakeExchange) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(exchange))


@pytest.fixture
def frozen_clock(monkeypatch: pytest.MonkeyPatch) -> int:
    """Pin the request timestamp so signed queries are reproducible."""

    monkeypatch.setattr(builder_module, "_now_ms", lambda: FIXED_TIMESTAMP)
    return FIXED_TIMESTAMP

from __future__ import annotations

import json
from typing import Any, Callable, List

import httpx
import pytest

from plaid_connect.config import Settings

ROOT_URI = "https://tartan.example.test"


class StubTransport(httpx.MockTransport):
    """MockTransport that records every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last_body(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PLAID_CLIENT_ID", "PLAID_SECRET", "PLAID_ROOT_URI", "PLAID_HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings(client_id="config_id", secret="config_secret", root_uri=ROOT_URI)


@pytest.fixture
def stub() -> Callable[..., StubTransport]:
    def _make(body: Any, status_code: int = 200) -> StubTransport:
        return StubTransport(lambda request: httpx.Response(status_code, json=body))

    return _make

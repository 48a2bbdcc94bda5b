"""Shared fixtures for apiprobe tests.

All functional tests run against ``httpx.MockTransport`` stubs; nothing here
opens a socket.
"""

from __future__ import annotations

from typing import Callable, List, Optional

import httpx
import pytest

BASE_URL = "http://api.test"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def base_url() -> str:
    return BASE_URL


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def last(self) -> Optional[httpx.Request]:
        return self.requests[-1] if self.requests else None


@pytest.fixture
def stub_transport() -> Callable[..., RecordingTransport]:
    """Build a transport answering every request with one canned response."""

    def factory(
        status: int = 200,
        *,
        json: object = None,
        text: Optional[str] = None,
        content: Optional[bytes] = None,
        headers: Optional[list] = None,
    ) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if json is not None:
                return httpx.Response(status, json=json, headers=headers)
            if text is not None:
                return httpx.Response(status, text=text, headers=headers)
            return httpx.Response(status, content=content or b"", headers=headers)

        return RecordingTransport(handler)

    return factory

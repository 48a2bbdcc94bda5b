"""pytest fixtures for apiprobe scenarios.

Registered through the ``pytest11`` entry point, so installing the package
is enough to make the fixtures available.
"""

from __future__ import annotations

from typing import Callable, Optional

import httpx
import pytest

from apiprobe.config import ProbeConfig, load_config
from apiprobe.logic.request_builder import TestRequest
from apiprobe.main import request
from apiprobe.models.context import Context


@pytest.fixture(scope="session")
def probe_config() -> ProbeConfig:
    return load_config()


@pytest.fixture
def probe_context() -> Context:
    """A fresh context per test: one test is one scenario."""
    return Context()


@pytest.fixture
def api_request(probe_config: ProbeConfig, probe_context: Context) -> Callable[..., TestRequest]:
    """Factory for builders sharing the configured base URL and this test's context."""

    def factory(
        base_url: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> TestRequest:
        return request(base_url, probe_context, transport=transport, config=probe_config)

    return factory

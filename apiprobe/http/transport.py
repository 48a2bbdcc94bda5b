"""Execution engine: final request assembly and the single network call.

``prepare`` is pure and turns a ``RequestSpec`` into the values sent on the
wire. ``send`` performs one call through ``httpx.AsyncClient``; transport
failures surface as ``FetchError`` and are never retried.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from apiprobe.errors import FetchError
from apiprobe.models.request_spec import BODYLESS_METHODS, PreparedRequest, RequestSpec

logger = logging.getLogger(__name__)


def prepare(spec: RequestSpec) -> PreparedRequest:
    method = str(getattr(spec.method, "value", spec.method)).upper()
    body = None if method in BODYLESS_METHODS else spec.body
    return PreparedRequest(method=method, url=spec.url, headers=dict(spec.headers), body=body)


async def send(
    prepared: PreparedRequest,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: Optional[float] = None,
) -> httpx.Response:
    """Issue ``prepared`` and return the fully read response.

    Raises ``FetchError`` when the transport cannot produce a response.
    """
    client_kwargs: dict = {"transport": transport}
    if timeout is not None:
        client_kwargs["timeout"] = timeout
    try:
        async with httpx.AsyncClient(**client_kwargs) as client:
            response = await client.request(
                prepared.method,
                prepared.url,
                headers=prepared.headers,
                content=prepared.body,
            )
    except (httpx.RequestError, httpx.InvalidURL, OSError) as e:
        logger.error("%s %s -> transport failure: %s", prepared.method, prepared.url, e)
        raise FetchError(f"Fetch failed: {e}") from e
    except Exception as e:
        # Any other rejection from a supplied transport is still a failed fetch
        logger.error("%s %s -> transport raised %s: %s", prepared.method, prepared.url, type(e).__name__, e)
        raise FetchError(f"Fetch failed: {e}") from e
    logger.debug("%s %s -> %s", prepared.method, prepared.url, response.status_code)
    return response


__all__ = ["prepare", "send"]

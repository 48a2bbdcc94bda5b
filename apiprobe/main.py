from __future__ import annotations

from typing import Any, MutableMapping, Optional

import httpx

from apiprobe.config import ProbeConfig, load_config
from apiprobe.errors import ProbeError
from apiprobe.logic.request_builder import TestRequest


def request(
    base_url: Optional[str] = None,
    context: Optional[MutableMapping[str, Any]] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: Optional[float] = None,
    config: Optional[ProbeConfig] = None,
) -> TestRequest:
    """Create a builder bound to ``base_url`` and an optionally shared context.

    Pass the same ``context`` to every builder of a scenario that must see
    cookies or fields saved by earlier requests. ``base_url``, ``timeout``
    and the ``show_details`` default fall back to ``load_config()``.
    """
    cfg = config if config is not None else load_config()
    url = base_url if base_url is not None else cfg.base_url
    if url is None:
        raise ProbeError("base_url is required (pass it or set APIPROBE_BASE_URL)")
    return TestRequest(
        url,
        context,
        transport=transport,
        timeout=timeout if timeout is not None else cfg.timeout,
        show_details=cfg.show_details,
    )


__all__ = ["request"]

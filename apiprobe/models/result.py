"""Value returned from a completed run."""

from __future__ import annotations

from typing import Any, MutableMapping, NamedTuple

import httpx


class ResultBundle(NamedTuple):
    response: httpx.Response
    json: Any
    context: MutableMapping[str, Any]


__all__ = ["ResultBundle"]

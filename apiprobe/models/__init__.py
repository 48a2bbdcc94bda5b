"""Data carried by a builder: request spec, shared context and result."""

from __future__ import annotations

from apiprobe.models.context import Context
from apiprobe.models.request_spec import HttpMethod, PreparedRequest, RequestSpec
from apiprobe.models.result import ResultBundle

__all__ = ["Context", "HttpMethod", "PreparedRequest", "RequestSpec", "ResultBundle"]

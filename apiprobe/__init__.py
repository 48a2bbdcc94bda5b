"""Fluent HTTP request builder for API integration tests.

Builds a request through chained calls, queues assertions against the
response, and runs both with a single ``await ... .run()``. A shared
``Context`` carries cookies and saved body fields between dependent
requests of one scenario.
"""

from __future__ import annotations

from apiprobe.errors import ExpectationError, FetchError, ProbeError
from apiprobe.logic.request_builder import TestRequest
from apiprobe.main import request
from apiprobe.models.context import Context
from apiprobe.models.result import ResultBundle
from apiprobe.runner import describe, fail, it, raises, test

__all__ = [
    "request",
    "TestRequest",
    "Context",
    "ResultBundle",
    "ProbeError",
    "FetchError",
    "ExpectationError",
    "test",
    "it",
    "describe",
    "fail",
    "raises",
]

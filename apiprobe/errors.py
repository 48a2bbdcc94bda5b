"""Exception taxonomy for request execution and response assertions.

- ``FetchError``: the transport could not complete the call (fatal).
- ``ExpectationError``: a registered assertion rejected the response.

Body parse failures are not represented here; they are recovered locally.
"""

from __future__ import annotations


class ProbeError(Exception):
    """Base class for all apiprobe errors."""


class FetchError(ProbeError):
    """Raised when the underlying HTTP transport fails."""


class ExpectationError(ProbeError, AssertionError):
    """Raised by an assertion callback with an expected-vs-actual message.

    Subclasses ``AssertionError`` so test runners report it as a failure
    rather than an error.
    """


__all__ = ["ProbeError", "FetchError", "ExpectationError"]

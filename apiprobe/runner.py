"""Test-runner hooks re-exported for scenario modules.

Thin pass-through to pytest so scenario files can import everything they
need from one place::

    from apiprobe import describe, it, request

    @describe("health endpoint")
    class TestHealth:
        async def test_ok(self, base_url):
            await request(base_url).get("/health").expect_status(200).run()

``test``/``it`` mark a coroutine function for the anyio pytest plugin;
``describe`` does the same for every test in a grouping class.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

import pytest

F = TypeVar("F", bound=Callable[..., Any])
C = TypeVar("C", bound=type)

fail = pytest.fail
raises = pytest.raises


def test(fn: F) -> F:
    return pytest.mark.anyio(fn)


it = test

# Not a test itself
test.__test__ = False  # type: ignore[attr-defined]


def describe(name: Optional[str] = None) -> Callable[[C], C]:
    """Class decorator: mark all tests of a grouping class as anyio tests.

    ``name`` is recorded as the class docstring when the class has none.
    """

    def decorate(cls: C) -> C:
        if name and not cls.__doc__:
            cls.__doc__ = name
        return pytest.mark.anyio(cls)

    return decorate


__all__ = ["test", "it", "describe", "fail", "raises"]

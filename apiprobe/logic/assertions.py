"""Deferred response assertions.

Every factory here returns a callback ``(response, json)`` that the builder
queues and the execution engine runs after the response arrives. A callback
signals failure by raising ``ExpectationError``; it may also return an
awaitable, which the engine awaits before moving on.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, MutableMapping, Optional, Union

import httpx

from apiprobe.errors import ExpectationError
from apiprobe.logic.body_codec import MISSING, canonical_json
from apiprobe.logic.cookies import find_cookie_pair
from apiprobe.models.context import COOKIE_KEY

logger = logging.getLogger(__name__)

Assertion = Callable[[httpx.Response, Any], Union[None, Awaitable[None]]]


def _strict_equal(actual: Any, expected: Any) -> bool:
    # JSON true/false must not compare equal to 1/0
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    return actual == expected


def status_equals(code: int) -> Assertion:
    def check(response: httpx.Response, json: Any) -> None:
        if response.status_code != code:
            raise ExpectationError(f"Expected status {code}, got {response.status_code}")

    return check


def header_matches(key: str, expected: Optional[str], exact: bool = True) -> Assertion:
    """Compare a response header by equality, or by substring when ``exact`` is false.

    A missing header reads as ``None``: it only satisfies an exact check
    against ``None`` and never satisfies a substring check.
    """

    def check(response: httpx.Response, json: Any) -> None:
        actual = response.headers.get(key)
        if exact:
            match = actual == expected
        else:
            match = actual is not None and expected is not None and expected in actual
        if not match:
            relation = "=" if exact else "to include"
            raise ExpectationError(f"Expected header '{key}' {relation} '{expected}', got '{actual}'")

    return check


def body_field_equals(key: str, expected: Any = MISSING) -> Assertion:
    def check(response: httpx.Response, json: Any) -> None:
        if not isinstance(json, dict) or key not in json:
            raise ExpectationError(f"Expected body to have key '{key}'")
        if expected is not MISSING and not _strict_equal(json[key], expected):
            raise ExpectationError(f"Expected body['{key}'] = '{expected}', got '{json[key]}'")

    return check


def body_equals(expected: Any) -> Assertion:
    """Compare the parsed body to ``expected`` through canonical JSON.

    Object key order is irrelevant; list order is significant.
    """

    def check(response: httpx.Response, json: Any) -> None:
        expected_text = canonical_json(expected)
        actual_text = canonical_json(json)
        if actual_text != expected_text:
            raise ExpectationError(
                f"Expected full body to equal:\n{expected_text}\nBut got:\n{actual_text}"
            )

    return check


def text_body_equals(expected_text: str) -> Assertion:
    def check(response: httpx.Response, json: Any) -> None:
        text = response.text
        if text != expected_text:
            raise ExpectationError(f"Expected text body to equal:\n{expected_text}\nBut got:\n{text}")

    return check


def save_body_field(context: MutableMapping[str, Any], body_key: str, context_key: str) -> Assertion:
    def save(response: httpx.Response, json: Any) -> None:
        value = json.get(body_key) if isinstance(json, dict) else None
        context[context_key] = value
        logger.debug("context.save key=%s from body field=%s", context_key, body_key)

    return save


def save_cookie(context: MutableMapping[str, Any], cookie_name: str) -> Assertion:
    def save(response: httpx.Response, json: Any) -> None:
        pair = find_cookie_pair(response.headers.get("set-cookie"), cookie_name)
        if pair is None:
            logger.debug("context.cookie not captured; '%s' absent from Set-Cookie", cookie_name)
            return
        context[COOKIE_KEY] = pair

    return save


__all__ = [
    "Assertion",
    "status_equals",
    "header_matches",
    "body_field_equals",
    "body_equals",
    "text_body_equals",
    "save_body_field",
    "save_cookie",
]

"""Request body encoding and response body parsing.

Outgoing bodies: strings are sent verbatim, anything else is serialised to
compact JSON. Incoming bodies: JSON when the ``Content-Type`` says so,
otherwise text. A body that cannot be decoded is replaced by
``UNREADABLE`` and the request carries on.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Tuple

import httpx

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
UNREADABLE = "<unreadable>"


class _Missing:
    """Marker for an argument that was not supplied (distinct from ``None``)."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def to_json_text(value: Any) -> str:
    """Serialise ``value`` the way ``JSON.stringify`` does: no whitespace."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def canonical_json(value: Any) -> str:
    """Serialise with sorted object keys so key order does not matter."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=True)


def encode_body(body: Any) -> Tuple[Optional[str], bool]:
    """Return ``(text, is_json)`` for an outgoing body.

    ``MISSING`` yields ``(None, False)``. ``None`` is a real value and is
    encoded as the JSON literal ``null``.
    """
    if body is MISSING:
        return None, False
    if isinstance(body, str):
        return body, False
    return to_json_text(body), True


def parse_response_body(response: httpx.Response) -> Tuple[Any, str]:
    """Parse a response into ``(json, text)``.

    Exactly one side is populated: ``json`` defaults to ``{}`` and ``text``
    to ``""``.
    """
    parsed: Any = {}
    text = ""
    content_type = response.headers.get("content-type") or ""
    try:
        if JSON_MEDIA_TYPE in content_type:
            parsed = response.json()
        else:
            text = response.text
    except (ValueError, UnicodeDecodeError) as e:
        # Recoverable: a broken body must not abort assertion processing
        logger.warning("Unreadable response body (content-type=%s): %s", content_type or "-", e)
        parsed = {}
        text = UNREADABLE
    return parsed, text


__all__ = [
    "MISSING",
    "UNREADABLE",
    "JSON_MEDIA_TYPE",
    "to_json_text",
    "canonical_json",
    "encode_body",
    "parse_response_body",
]

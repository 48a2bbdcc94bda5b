"""Fluent request builder.

Configuration calls mutate the builder's ``RequestSpec`` and return the
builder; ``expect_*``/``save_*`` calls queue assertion callbacks. Nothing
touches the network until ``run`` is awaited::

    ctx = Context()
    await (
        request(base_url, ctx)
        .post("/login", {"user": "ada"})
        .expect_status(200)
        .save_cookie_from_response("session")
        .run()
    )
    await request(base_url, ctx).get("/me").send_cookie_from_context().expect_status(200).run()
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, List, Mapping, MutableMapping, Optional
from urllib.parse import urlencode

import httpx

from apiprobe.http.transport import prepare, send as send_request
from apiprobe.logging_setup import configure_logging
from apiprobe.logic import assertions
from apiprobe.logic.assertions import Assertion
from apiprobe.logic.body_codec import JSON_MEDIA_TYPE, MISSING, encode_body, parse_response_body
from apiprobe.logic.details import enable_details, log_request, log_response
from apiprobe.models.context import COOKIE_KEY, Context
from apiprobe.models.request_spec import HttpMethod, RequestSpec
from apiprobe.models.result import ResultBundle

logger = logging.getLogger(__name__)


class TestRequest:
    """Accumulates one request plus the checks to run on its response."""

    # Keep pytest from collecting this class when it is imported into a test module
    __test__ = False

    def __init__(
        self,
        base_url: str,
        context: Optional[MutableMapping[str, Any]] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
        show_details: bool = False,
    ) -> None:
        # An empty mapping supplied by the caller must still be shared, not replaced
        self.context: MutableMapping[str, Any] = context if context is not None else Context()
        self._spec = RequestSpec(base_url=base_url)
        self._assertions: List[Assertion] = []
        self._transport = transport
        self._timeout = timeout
        self._show_details = show_details

    @property
    def spec(self) -> RequestSpec:
        return self._spec

    # ------------------
    # Method and path
    # ------------------

    def get(self, path: str) -> "TestRequest":
        self._set_bodyless(HttpMethod.GET, path)
        return self

    def delete(self, path: str) -> "TestRequest":
        self._set_bodyless(HttpMethod.DELETE, path)
        return self

    def post(self, path: str, body: Any = MISSING) -> "TestRequest":
        self._set_method_and_body(HttpMethod.POST, path, body)
        return self

    def put(self, path: str, body: Any = MISSING) -> "TestRequest":
        self._set_method_and_body(HttpMethod.PUT, path, body)
        return self

    def patch(self, path: str, body: Any = MISSING) -> "TestRequest":
        self._set_method_and_body(HttpMethod.PATCH, path, body)
        return self

    def _set_bodyless(self, method: HttpMethod, path: str) -> None:
        self._spec.method = method
        self._spec.path = path
        self._spec.body = None

    def _set_method_and_body(self, method: HttpMethod, path: str, body: Any) -> None:
        self._spec.method = method
        self._spec.path = path
        self._apply_body(body)

    def _apply_body(self, body: Any) -> None:
        text, is_json = encode_body(body)
        self._spec.body = text
        if is_json:
            self._spec.headers["Content-Type"] = JSON_MEDIA_TYPE

    # ------------------
    # Query, body, headers
    # ------------------

    def query(self, params: Mapping[str, Any]) -> "TestRequest":
        encoded = urlencode(params)
        self._spec.query_string += ("&" if self._spec.query_string else "?") + encoded
        return self

    def send(self, body: Any) -> "TestRequest":
        """Set the body without changing the method."""
        self._apply_body(body)
        return self

    def set_header(self, key: str, value: Any) -> "TestRequest":
        self._spec.headers[key] = str(value)
        return self

    def set_headers(self, headers: Mapping[str, Any]) -> "TestRequest":
        for key, value in headers.items():
            self._spec.headers[key] = str(value)
        return self

    def send_cookie_from_context(self) -> "TestRequest":
        cookie = self.context.get(COOKIE_KEY)
        if cookie:
            self._spec.headers["Cookie"] = str(cookie)
        return self

    # ------------------
    # Assertions
    # ------------------

    def expect_status(self, code: int) -> "TestRequest":
        return self.expect(assertions.status_equals(code))

    def expect_header(self, key: str, expected: Optional[str], exact: bool = True) -> "TestRequest":
        return self.expect(assertions.header_matches(key, expected, exact))

    def expect_body_field(self, key: str, expected: Any = MISSING) -> "TestRequest":
        return self.expect(assertions.body_field_equals(key, expected))

    def expect_body_equals(self, expected: Any) -> "TestRequest":
        return self.expect(assertions.body_equals(expected))

    def expect_text_body(self, text: str) -> "TestRequest":
        return self.expect(assertions.text_body_equals(text))

    def expect(self, fn: Assertion) -> "TestRequest":
        """Queue ``fn(response, json)``; it may be a plain or async callable."""
        self._assertions.append(fn)
        return self

    def save_body_field_to_context(self, body_key: str, context_key: str) -> "TestRequest":
        return self.expect(assertions.save_body_field(self.context, body_key, context_key))

    def save_cookie_from_response(self, cookie_name: str) -> "TestRequest":
        return self.expect(assertions.save_cookie(self.context, cookie_name))

    # ------------------
    # Execution
    # ------------------

    async def run(self, show_details: Optional[bool] = None) -> ResultBundle:
        """Send the request, run queued assertions in order, return the result.

        Raises ``FetchError`` when the transport fails and the first
        assertion error otherwise; remaining assertions are skipped.
        """
        if show_details is None:
            show_details = self._show_details
        prepared = prepare(self._spec)
        if show_details:
            configure_logging()
            enable_details()
            log_request(prepared)

        response = await send_request(prepared, transport=self._transport, timeout=self._timeout)
        json, text = parse_response_body(response)

        if show_details:
            log_response(response, json, text)

        for check in self._assertions:
            outcome = check(response, json)
            if inspect.isawaitable(outcome):
                await outcome

        return ResultBundle(response=response, json=json, context=self.context)

    def __repr__(self) -> str:
        return f"<TestRequest {self._spec.method.value} {self._spec.url} assertions={len(self._assertions)}>"


__all__ = ["TestRequest"]

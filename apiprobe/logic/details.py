"""Human-readable request/response dumps for ``run(show_details=True)``."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from apiprobe.models.request_spec import PreparedRequest

logger = logging.getLogger("apiprobe.details")


def enable_details() -> None:
    """Make detail dumps visible even when the host configured logging first."""
    if logger.getEffectiveLevel() > logging.INFO:
        logger.setLevel(logging.INFO)


def log_request(prepared: PreparedRequest) -> None:
    logger.info("===== REQUEST =====")
    logger.info("%s %s", prepared.method, prepared.url)
    logger.info("Headers: %s", prepared.headers)
    if prepared.body:
        logger.info("Body: %s", prepared.body)


def log_response(response: httpx.Response, json: Any, text: str) -> None:
    logger.info("===== RESPONSE =====")
    logger.info("Status: %s", response.status_code)
    logger.info("Headers: %s", dict(response.headers.items()))
    # Empty JSON (no body, or a non-JSON response) falls back to the text dump
    if json:
        logger.info("JSON Body: %s", json)
    else:
        logger.info("Text Body: %s", text)


__all__ = ["enable_details", "log_request", "log_response"]

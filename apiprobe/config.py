"""Configuration for apiprobe.

Rules:
- Primary source: ``apiprobe_config.json`` in the working directory.
- Overrides: environment variables prefixed ``APIPROBE_``.
- Validation: Pydantic enforces value constraints.

None of this is required: a builder created with an explicit base URL runs
with the defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator


ROOT_CONFIG_FILE = Path("apiprobe_config.json")
DEFAULT_TIMEOUT_SECONDS = 10.0
logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


class ProbeConfig(BaseModel):
    base_url: Optional[str] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    show_details: bool = Field(default=False)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v:
            return None
        return v.rstrip("/")


def _read_json_file(path: Path) -> dict:
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                return data
            logger.warning("Ignoring %s: top-level value is not an object", path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def load_config(path: Path = ROOT_CONFIG_FILE) -> ProbeConfig:
    """Load configuration with validation.

    Precedence (highest first):
    1) Environment variables
    2) ``apiprobe_config.json``
    3) Defaults
    """

    base = _read_json_file(path)

    def _base(key: str) -> Optional[str]:
        val = base.get(key)
        return str(val) if val is not None else None

    base_url = _env("APIPROBE_BASE_URL") or _base("base_url")
    timeout_text = _env("APIPROBE_TIMEOUT") or _base("timeout") or str(DEFAULT_TIMEOUT_SECONDS)
    show_details_text = _env("APIPROBE_SHOW_DETAILS") or _base("show_details") or "false"

    try:
        return ProbeConfig(
            base_url=base_url,
            timeout=str(timeout_text).strip(),
            show_details=str(show_details_text).strip().lower() in _TRUE_VALUES,
        )
    except PydanticValidationError as e:
        logger.error("Invalid apiprobe configuration: %s", e)
        raise


__all__ = ["ProbeConfig", "load_config", "DEFAULT_TIMEOUT_SECONDS"]

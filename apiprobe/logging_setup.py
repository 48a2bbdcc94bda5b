"""Central logging configuration for apiprobe.

Applies a root stdout handler so request/response detail dumps and module
loggers are visible without per-test setup. Does nothing when the host (for
example pytest's log capture or an application) already configured the
root logger, to avoid duplicate output.
"""
from __future__ import annotations
import logging
from logging.config import dictConfig

_DICT_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
        },
        "details": {
            "format": "%(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
        "details": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "details",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {"level": "INFO", "handlers": ["console"]},
    "loggers": {
        "apiprobe.details": {"level": "INFO", "handlers": ["details"], "propagate": False},
        "httpx": {"level": "WARNING"},
        "httpcore": {"level": "WARNING"},
    },
}


def configure_logging() -> None:
    """Configure logging once.

    If the root logger already has handlers, return to prevent duplicate
    output.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    dictConfig(_DICT_CONFIG)


__all__ = ["configure_logging"]

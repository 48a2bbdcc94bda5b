"""Shared state carried between dependent requests of one scenario.

A ``Context`` is created once per logical test scenario and handed to every
builder that must see earlier state (a captured session cookie, ids saved
from earlier response bodies). Builders hold a reference and never copy it.

The mapping is not synchronised: builders sharing one context and running
concurrently may overwrite each other's writes.
"""

from __future__ import annotations

from typing import Optional

COOKIE_KEY = "cookie"


class Context(dict):
    """A plain ``dict`` with a convenience accessor for the session cookie."""

    @property
    def cookie(self) -> Optional[str]:
        return self.get(COOKIE_KEY)

    @cookie.setter
    def cookie(self, value: Optional[str]) -> None:
        self[COOKIE_KEY] = value

    def __repr__(self) -> str:
        return f"Context({dict.__repr__(self)})"


__all__ = ["Context", "COOKIE_KEY"]

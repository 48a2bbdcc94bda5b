"""Set-Cookie parsing.

A folded ``Set-Cookie`` value holds several cookies separated by commas, but
attributes such as ``Expires=Wed, 21 Oct 2026 07:28:00 GMT`` contain commas
too. Splitting only on a comma that is followed by ``name=`` keeps those
attributes intact.
"""

from __future__ import annotations

import re
from typing import List, Optional

_COOKIE_BOUNDARY = re.compile(r",(?=\s*\w+=)")


def split_set_cookie(header_value: str) -> List[str]:
    return [part.strip() for part in _COOKIE_BOUNDARY.split(header_value)]


def find_cookie_pair(header_value: Optional[str], cookie_name: str) -> Optional[str]:
    """Return ``name=value`` for ``cookie_name`` with attributes stripped.

    Returns ``None`` when the header is empty or the cookie is not present.
    """
    if not header_value:
        return None
    prefix = f"{cookie_name}="
    for entry in split_set_cookie(header_value):
        if entry.startswith(prefix):
            return entry.split(";", 1)[0]
    return None


__all__ = ["split_set_cookie", "find_cookie_pair"]

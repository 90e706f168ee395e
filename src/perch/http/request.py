"""Immutable HTTP request.

Frozen metadata only. Responders decide from the method, path and
headers; none of them reads a request body or the query string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from perch.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the decoded URL path exactly as the server received it.
    Responders that need the original path (for reporting or redirects)
    read it from here unmodified.
    """

    method: str
    path: str
    headers: Headers

    @property
    def is_head(self) -> bool:
        """True for ``HEAD`` requests (headers only, no body)."""
        return self.method == "HEAD"

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
        )

"""Immutable HTTP request.

Only what a redirect decision reads: method, path, cookies and raw header
pairs. The body is never touched, so requests that are not redirected
reach the next handler with their ``receive`` channel unconsumed.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from siteredirect.http.cookies import parse_cookies

RawHeaders: TypeAlias = tuple[tuple[bytes, bytes], ...]


def _values(headers: RawHeaders, name: str) -> list[str]:
    key = name.lower().encode("latin-1")
    return [value.decode("latin-1") for hname, value in headers if hname.lower() == key]


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Header names are matched case-insensitively. Cookies are parsed once at
    creation time (in ``from_asgi``) rather than on every lookup.
    """

    method: str
    path: str
    headers: RawHeaders = ()
    cookies: Mapping[str, str] = field(default_factory=dict)

    def cookie(self, name: str) -> str | None:
        """Return the value of cookie *name*, or ``None`` if it was not sent."""
        return self.cookies.get(name)

    def header_values(self, name: str) -> list[str]:
        """Return every value sent for header *name*, in arrival order.

        A header line repeated twice gives two values; a single line
        holding ``"a, b"`` gives one.
        """
        return _values(self.headers, name)

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        headers = tuple(scope.get("headers", ()))
        return cls(
            method=scope.get("method", "GET"),
            path=scope.get("path", ""),
            headers=headers,
            cookies=parse_cookies(_values(headers, "cookie")),
        )

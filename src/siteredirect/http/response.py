"""HTTP response and the permanent redirect that produces one."""

from __future__ import annotations

import html
from dataclasses import dataclass, replace
from http import HTTPStatus

MOVED_PERMANENTLY = 301


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response. An empty ``content_type`` sends no Content-Type."""

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or ``None``."""
        name = name.lower()
        return next((value for hname, value in self.headers if hname.lower() == name), None)

    @property
    def location(self) -> str | None:
        """The ``Location`` header, if any."""
        return self.header("location")

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body


@dataclass(frozen=True, slots=True)
class Redirect:
    """A permanent redirect decision.

    ``to_response()`` renders it the way browsers expect: a ``Location``
    header, an HTML content type for ``GET`` and ``HEAD``, and for ``GET``
    a short link for clients that do not follow redirects.
    """

    url: str
    status: int = MOVED_PERMANENTLY

    def to_response(self, method: str = "GET") -> Response:
        """Build the ``Response`` for a request made with *method*."""
        method = method.upper()
        content_type = "text/html; charset=utf-8" if method in ("GET", "HEAD") else ""
        body = ""
        if method == "GET":
            phrase = HTTPStatus(self.status).phrase
            body = f'<a href="{html.escape(self.url)}">{phrase}</a>.\n\n'
        response = Response(body=body, status=self.status, content_type=content_type)
        return response.with_header("Location", self.url)

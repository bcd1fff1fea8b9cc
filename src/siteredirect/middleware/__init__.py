"""Handlers and filters.

A handler is any async callable matching:
    async def handler(request: Request) -> Response

Built-in filters:
    SiteRedirect -- Redirect ``/`` by cookie or header, delegate the rest
"""

from siteredirect.middleware.protocol import Handler, Next
from siteredirect.middleware.redirect import SiteRedirect, is_root_path, resolve_redirect

__all__ = [
    "Handler",
    "Next",
    "SiteRedirect",
    "is_root_path",
    "resolve_redirect",
]

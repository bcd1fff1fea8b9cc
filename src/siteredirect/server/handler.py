"""ASGI handler: root redirects in front of any ASGI application.

The only component that touches raw ASGI directly. Root requests are
answered here; everything else, including lifespan and websocket scopes,
goes to the wrapped application with the original scope, receive and send.
"""

import logging

from siteredirect._internal.asgi import ASGIApp, Receive, Scope, Send
from siteredirect.config import RedirectConfig, validate_config
from siteredirect.http.request import Request
from siteredirect.middleware.redirect import resolve_redirect
from siteredirect.server.sender import send_response

logger = logging.getLogger("siteredirect")


class SiteRedirectApp:
    """Pure ASGI middleware form of ``SiteRedirect``.

    Usage::

        app = SiteRedirectApp(
            inner_app,
            RedirectConfig.from_mapping(settings["siteRedirect"]),
            name="root-redirect",
        )

    Raises:
        ConfigurationError: From ``validate_config()`` when *config* is
            invalid; the application is never built in that case.
    """

    __slots__ = ("app", "config", "name")

    def __init__(self, app: ASGIApp, config: RedirectConfig, name: str = "siteredirect") -> None:
        self.config = validate_config(config)
        self.app = app
        self.name = name
        logger.debug("%s: wrapping %r, redirecting / to %s", name, app, self.config.base_url)

    def __repr__(self) -> str:
        return f"SiteRedirectApp(name={self.name!r}, base_url={self.config.base_url!r})"

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request.from_asgi(scope)
        redirect = resolve_redirect(self.config, request, self.name)
        if redirect is None:
            await self.app(scope, receive, send)
            return

        await send_response(redirect.to_response(request.method), send)

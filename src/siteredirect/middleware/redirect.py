"""Root redirect: send visitors of ``/`` to their segment of the site.

The segment is picked from a cookie or header value looked up in a static
redirection map. Cookies are checked before headers, each in declared
order, and the first value with a non-empty target wins. When nothing
matches, the default path is used. Every other path is delegated to the
next handler untouched.
"""

import logging
from urllib.parse import quote

from siteredirect.config import RedirectConfig, validate_config
from siteredirect.http.request import Request
from siteredirect.http.response import Redirect, Response
from siteredirect.middleware.protocol import Next

logger = logging.getLogger("siteredirect")


def is_root_path(path: str) -> bool:
    """True for the only paths eligible for a redirect: ``""`` and ``"/"``."""
    return path in ("", "/")


def _escape_non_ascii(location: str) -> str:
    """Percent-encode non-ASCII characters; leave everything else as written."""
    if location.isascii():
        return location
    return "".join(ch if ch.isascii() else quote(ch) for ch in location)


def _target(config: RedirectConfig, segment: str) -> str:
    return _escape_non_ascii(f"{config.base_url}/{segment}/")


def resolve_redirect(
    config: RedirectConfig, request: Request, name: str = "siteredirect"
) -> Redirect | None:
    """Decide where a request goes.

    Returns ``None`` when the request must be delegated (non-root path),
    otherwise the ``Redirect`` to send. *config* must already have been
    through ``validate_config()``.
    """
    if not is_root_path(request.path):
        return None

    mapping = config.redirection_map

    for cookie_name in config.redirect_cookies:
        value = request.cookie(cookie_name)
        if value is None:
            continue
        segment = mapping.get(value, "")
        if segment:
            location = _target(config, segment)
            logger.debug("%s: cookie %s=%r -> %s", name, cookie_name, value, location)
            return Redirect(location)

    for header_name in config.redirect_headers:
        values = request.header_values(header_name)
        if len(values) != 1:
            continue
        segment = mapping.get(values[0], "")
        if segment:
            location = _target(config, segment)
            logger.debug("%s: header %s=%r -> %s", name, header_name, values[0], location)
            return Redirect(location)

    # No trailing slash appended here, unlike mapped targets
    location = _escape_non_ascii(f"{config.base_url}/{config.default_path}")
    logger.debug("%s: no signal matched -> %s", name, location)
    return Redirect(location)


class SiteRedirect:
    """Redirect root requests by cookie or header, delegate everything else.

    Construction validates the configuration and raises a
    ``ConfigurationError`` subclass on the first problem found, so an
    instance always holds a usable, normalized config. Instances keep no
    mutable state and can serve concurrent requests.

    Usage::

        async def site(request: Request) -> Response:
            return Response("hello")

        handler = SiteRedirect(
            site,
            RedirectConfig(
                base_url="https://www.mysite.com",
                default_path="en/",
                redirect_cookies=["site_lang"],
                redirection_map={"fr": "fr", "de": "de"},
            ),
            name="root-redirect",
        )
        response = await handler(request)
    """

    __slots__ = ("config", "name", "next")

    def __init__(self, next: Next, config: RedirectConfig, name: str = "siteredirect") -> None:
        self.config = validate_config(config)
        self.next = next
        self.name = name
        logger.debug(
            "%s: redirecting / to %s (%d cookies, %d headers, %d map entries)",
            name,
            self.config.base_url,
            len(self.config.redirect_cookies),
            len(self.config.redirect_headers),
            len(self.config.redirection_map),
        )

    def __repr__(self) -> str:
        return f"SiteRedirect(name={self.name!r}, base_url={self.config.base_url!r})"

    async def __call__(self, request: Request) -> Response:
        redirect = resolve_redirect(self.config, request, self.name)
        if redirect is None:
            return await self.next(request)
        return redirect.to_response(request.method)

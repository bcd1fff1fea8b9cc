"""siteredirect: send visitors of a site root to their segment of the site.

Picks a locale or segment from a cookie or header value, looks it up in a
static redirection map, and answers ``/`` with a permanent redirect. Every
other path passes through to the next handler untouched.

Basic usage::

    from siteredirect import RedirectConfig, SiteRedirectApp

    app = SiteRedirectApp(
        inner_app,
        RedirectConfig(
            base_url="https://www.mysite.com",
            default_path="en/",
            redirect_cookies=["site_lang"],
            redirect_headers=["CF-IPCountry"],
            redirection_map={"FR": "fr", "DE": "de"},
        ),
    )
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "EmptyRedirectionMapError",
    "Handler",
    "MissingBaseURLError",
    "MissingDefaultPathError",
    "MissingSignalSourceError",
    "Next",
    "Redirect",
    "RedirectConfig",
    "Request",
    "Response",
    "SiteRedirect",
    "SiteRedirectApp",
    "SiteRedirectError",
    "create_config",
    "validate_config",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import siteredirect`` fast while providing a clean top-level API.
    """
    if name in ("RedirectConfig", "create_config", "validate_config"):
        from siteredirect import config as _config

        return getattr(_config, name)

    if name == "Request":
        from siteredirect.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from siteredirect.http import response as _resp

        return getattr(_resp, name)

    if name in ("Handler", "Next"):
        from siteredirect.middleware import protocol as _mw

        return getattr(_mw, name)

    if name == "SiteRedirect":
        from siteredirect.middleware.redirect import SiteRedirect

        return SiteRedirect

    if name == "SiteRedirectApp":
        from siteredirect.server.handler import SiteRedirectApp

        return SiteRedirectApp

    if name in (
        "ConfigurationError",
        "EmptyRedirectionMapError",
        "MissingBaseURLError",
        "MissingDefaultPathError",
        "MissingSignalSourceError",
        "SiteRedirectError",
    ):
        from siteredirect import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

"""siteredirect exception hierarchy.

Every failure this package can report happens while a handler is being
constructed. Request processing never raises on its own.
"""


class SiteRedirectError(Exception):
    """Base for all siteredirect-specific errors."""


class ConfigurationError(SiteRedirectError):
    """Raised when a redirect configuration is invalid.

    Raised by ``validate_config()`` and therefore by the ``SiteRedirect``
    and ``SiteRedirectApp`` constructors. No handler is ever created from
    a configuration that fails validation.
    """


class MissingSignalSourceError(ConfigurationError):
    """Neither cookies nor headers are configured for inspection."""

    def __init__(
        self,
        detail: str = "you must specify at least one from redirect_cookies or redirect_headers",
    ) -> None:
        super().__init__(detail)


class EmptyRedirectionMapError(ConfigurationError):
    """The redirection map has no entries."""

    def __init__(self, detail: str = "redirection map cannot be empty") -> None:
        super().__init__(detail)


class MissingBaseURLError(ConfigurationError):
    """The base URL is empty."""

    def __init__(self, detail: str = "base_url can't be empty") -> None:
        super().__init__(detail)


class MissingDefaultPathError(ConfigurationError):
    """The default path is empty."""

    def __init__(self, detail: str = "default_path can't be empty") -> None:
        super().__init__(detail)
